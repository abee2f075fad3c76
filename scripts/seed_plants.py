#!/usr/bin/env python3
"""
CLI tool for loading plant listings into the PlantNet catalog

Usage:
    python seed_plants.py plants.json
    python seed_plants.py --skip-existing plants.json

The file holds a JSON array of plant objects (name, category, price,
quantity, image, seller, ...). Objects with an "id" keep it.
"""

import asyncio
import argparse
import json
import sys
from pathlib import Path
from typing import List

from pydantic import ValidationError

# Add backend to path
sys.path.append(str(Path(__file__).parent.parent / "backend"))

from app.core.database import AsyncSessionLocal, init_db
from app.models.plant import Plant
from app.schemas.plant import PlantCreate
from app.services.catalog import insert_plant


def load_plants(path: Path) -> List[PlantCreate]:
    """Parse and validate plant records from a JSON file"""
    with open(path, encoding="utf-8") as fh:
        records = json.load(fh)

    if not isinstance(records, list):
        raise ValueError("Expected a JSON array of plants")

    return [PlantCreate.model_validate(record) for record in records]


async def seed(plants: List[PlantCreate], skip_existing: bool = False) -> int:
    """Insert plants and return how many were written"""
    inserted = 0
    async with AsyncSessionLocal() as db:
        for plant_data in plants:
            if plant_data.id and skip_existing and await db.get(Plant, plant_data.id):
                print(f"⏭️  Skipping existing plant: {plant_data.id}")
                continue

            plant = await insert_plant(db, plant_data)
            print(f"✅ Added: {plant.name} ({plant.id})")
            inserted += 1
    return inserted


async def main():
    """Main CLI function"""
    parser = argparse.ArgumentParser(description='Load plant listings into PlantNet')
    parser.add_argument('--skip-existing', action='store_true', help='Skip plants whose id is already stored')
    parser.add_argument('--verbose', '-v', action='store_true', help='Verbose output')
    parser.add_argument('path', help='Path to a JSON file of plants')

    args = parser.parse_args()

    path = Path(args.path)
    if not path.is_file():
        print(f"❌ File does not exist: {path}")
        sys.exit(1)

    try:
        plants = load_plants(path)
    except (ValueError, ValidationError) as e:
        print(f"❌ Invalid plant file: {e}")
        sys.exit(1)

    if not plants:
        print("❌ No plants found")
        sys.exit(1)

    try:
        await init_db()
        inserted = await seed(plants, skip_existing=args.skip_existing)
    except Exception as e:
        print(f"❌ Fatal error: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)

    print(f"\n📊 Seeding complete: {inserted} of {len(plants)} plant(s) added")


if __name__ == "__main__":
    asyncio.run(main())
