#!/usr/bin/env python3
"""
Database seeding script for development.
Creates the equipment, status and user masters plus sample projects.
"""

import asyncio
import sys
from pathlib import Path

# Add parent directory to path to import our modules
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from survey_schedule.database import AsyncSessionLocal, init_db
from survey_schedule.services.seed_service import seed_database


async def main():
    """Main function"""
    print("Seeding database...\n")

    await init_db()

    async with AsyncSessionLocal() as session:
        summary = await seed_database(session)

    print("✅ Database seeding completed successfully!")
    print("\nSummary:")
    for table, count in summary.items():
        print(f"  - {table}: {count}")


if __name__ == "__main__":
    asyncio.run(main())
