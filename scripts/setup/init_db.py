# scripts/setup/init_db.py
"""
Initialize database: creates all tables and, on an empty database, the first Admin.
Run once before first launch, or after adding new models.
Usage: python scripts/setup/init_db.py --admin-name "مدير النظام" --department "الإدارة"
"""

import argparse
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from maktabi.database import create_tables, engine, SessionLocal
from maktabi.config import settings
from maktabi.models.employee import Employee
from maktabi.services import crud
from sqlalchemy import inspect, text


def seed_admin(name: str, department: str):
    db = SessionLocal()
    try:
        if db.query(Employee).filter(Employee.role == "Admin").first():
            print("ℹ️  An Admin already exists, nothing seeded")
            return None
        admin = crud.create_record(db, Employee, {"name": name, "department": department, "role": "Admin"})
        print(f"👤 Admin created: {admin.name} (X-Employee-Id: {admin.id})")
        return admin
    finally:
        db.close()


def main():
    parser = argparse.ArgumentParser(description="Create Maktabi tables and the first Admin")
    parser.add_argument("--admin-name", default="Administrator")
    parser.add_argument("--department", default="Administration")
    args = parser.parse_args()

    print("🗄️  Maktabi DB Initialization")
    print("=" * 40)
    print(f"📡 Database: {settings.DATABASE_URL}")

    # Test connection
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        print("✅ Database connection OK")
    except Exception as e:
        print(f"❌ Cannot connect to database: {e}")
        sys.exit(1)

    print("\n📋 Creating tables...")
    create_tables()
    tables = sorted(inspect(engine).get_table_names())
    print(f"\n📊 Tables in database ({len(tables)} total):")
    for t in tables:
        print(f"   ✓ {t}")

    seed_admin(args.admin_name, args.department)

    print("\n🎉 Database ready! You can now start the backend:")
    print("   uvicorn maktabi.main:app --host 0.0.0.0 --port 8080 --reload")


if __name__ == "__main__":
    main()
