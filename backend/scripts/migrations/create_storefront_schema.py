#!/usr/bin/env python3
"""
Script: create_storefront_schema.py
Purpose: Create the tables used by the orders and mock data endpoints

This script:
1. Checks which storefront tables already exist
2. Creates the missing ones (CREATE TABLE IF NOT EXISTS)
3. Verifies every table is present

Usage:
    cd backend && source venv/bin/activate
    python scripts/migrations/create_storefront_schema.py [--dry-run]

Options:
    --dry-run    Show what would be done without making changes
"""

import os
import sys
import argparse
import psycopg2
from pathlib import Path
from datetime import datetime

BACKEND_DIR = Path(__file__).parent.parent.parent

from dotenv import load_dotenv

# Load environment
env_path = BACKEND_DIR / '.env.development'
if env_path.exists():
    load_dotenv(env_path)
else:
    load_dotenv(BACKEND_DIR / '.env')

DATABASE_URL = os.getenv("DATABASE_URL")

# Table name -> DDL, in creation order (foreign keys point backwards)
TABLES = {
    'product_categories': """
        CREATE TABLE IF NOT EXISTS product_categories (
            id SERIAL PRIMARY KEY,
            name VARCHAR(255) NOT NULL,
            description TEXT,
            parent_id INTEGER REFERENCES product_categories(id) ON DELETE CASCADE,
            created_at TIMESTAMP NOT NULL DEFAULT NOW()
        )
    """,
    'products': """
        CREATE TABLE IF NOT EXISTS products (
            id SERIAL PRIMARY KEY,
            name VARCHAR(255) NOT NULL,
            price NUMERIC(12, 2),
            old_price NUMERIC(12, 2),
            main_image VARCHAR(512),
            images JSONB NOT NULL DEFAULT '[]',
            description TEXT,
            attributes JSONB NOT NULL DEFAULT '[]',
            views INTEGER NOT NULL DEFAULT 0,
            created_at TIMESTAMP NOT NULL DEFAULT NOW()
        )
    """,
    'product_category_links': """
        CREATE TABLE IF NOT EXISTS product_category_links (
            product_id INTEGER NOT NULL REFERENCES products(id) ON DELETE CASCADE,
            category_id INTEGER NOT NULL REFERENCES product_categories(id) ON DELETE CASCADE,
            PRIMARY KEY (product_id, category_id)
        )
    """,
    'attributes': """
        CREATE TABLE IF NOT EXISTS attributes (
            id SERIAL PRIMARY KEY,
            key VARCHAR(255) NOT NULL UNIQUE,
            values JSONB NOT NULL DEFAULT '[]',
            type VARCHAR(50) NOT NULL DEFAULT 'radio'
        )
    """,
    'product_reviews': """
        CREATE TABLE IF NOT EXISTS product_reviews (
            id SERIAL PRIMARY KEY,
            product_id INTEGER NOT NULL REFERENCES products(id) ON DELETE CASCADE,
            title VARCHAR(255),
            description TEXT,
            rating NUMERIC(2, 1),
            user_name VARCHAR(255),
            created_at TIMESTAMP NOT NULL DEFAULT NOW()
        )
    """,
    'orders': """
        CREATE TABLE IF NOT EXISTS orders (
            id SERIAL PRIMARY KEY,
            slug VARCHAR(255),
            page_title VARCHAR(255),
            status VARCHAR(50) NOT NULL DEFAULT 'pending',
            user_id VARCHAR(255),
            cart TEXT,
            total_price NUMERIC(12, 2),
            old_total_price NUMERIC(12, 2),
            total_qnt INTEGER,
            customer_name VARCHAR(255),
            customer_phone VARCHAR(100),
            customer_address TEXT,
            shipping_method VARCHAR(255),
            customer_comment TEXT,
            created_at TIMESTAMP NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMP
        )
    """,
}


def print_header(title: str):
    """Print formatted header"""
    print(f"\n{'='*60}")
    print(f"  {title}")
    print(f"{'='*60}\n")


def print_step(step: int, description: str):
    """Print step indicator"""
    print(f"\n[Step {step}] {description}")
    print("-" * 50)


def check_tables_exist(cursor) -> dict:
    """Check which tables currently exist"""
    result = {}

    for table in TABLES:
        cursor.execute("""
            SELECT EXISTS (
                SELECT FROM information_schema.tables
                WHERE table_schema = 'public'
                AND table_name = %s
            )
        """, (table,))
        result[table] = cursor.fetchone()[0]

    return result


def main():
    parser = argparse.ArgumentParser(description='Create storefront tables')
    parser.add_argument('--dry-run', action='store_true', help='Show what would be done without making changes')
    args = parser.parse_args()

    dry_run = args.dry_run

    print_header("Storefront schema")
    print(f"Timestamp: {datetime.now().isoformat()}")
    print(f"Mode: {'DRY RUN' if dry_run else 'EXECUTE'}")

    if not DATABASE_URL:
        print("\nERROR: DATABASE_URL not set")
        sys.exit(1)

    print_step(1, "Connecting to database")
    try:
        conn = psycopg2.connect(DATABASE_URL)
        conn.autocommit = False
        cursor = conn.cursor()
        print("  Connected successfully")
    except Exception as e:
        print(f"  ERROR: {e}")
        sys.exit(1)

    print_step(2, "Checking current database state")
    before_state = check_tables_exist(cursor)
    for table, exists in before_state.items():
        print(f"    {table}: {'EXISTS' if exists else 'not found'}")

    print_step(3, "Creating missing tables")
    try:
        for table, ddl in TABLES.items():
            if before_state[table]:
                continue
            if dry_run:
                print(f"  [DRY RUN] Would create table: {table}")
                continue
            print(f"  Creating table: {table}")
            cursor.execute(ddl)
        if not dry_run:
            conn.commit()
            print("  Migration committed successfully")
    except Exception as e:
        conn.rollback()
        print(f"  ERROR: {e}")
        print("  Migration rolled back")
        sys.exit(1)

    print_step(4, "Verifying database changes")
    after_state = check_tables_exist(cursor)
    missing = [table for table, exists in after_state.items() if not exists]

    cursor.close()
    conn.close()

    if missing and not dry_run:
        print(f"  FAILED, still missing: {', '.join(missing)}")
        sys.exit(1)

    print("  Done")


if __name__ == '__main__':
    main()
