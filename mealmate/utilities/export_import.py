"""
Export and Import functionality for recipes, pantry, plan and settings.
"""
import csv
import json
import zipfile
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO
import logging

from mealmate.domain.GroceryItem import GroceryItem
from mealmate.infra.Storage_Service import StorageService

logger = logging.getLogger(__name__)

EXPORT_VERSION = '1.0'

# archive member name -> (getter, setter) on StorageService
_RESOURCES = {
    'recipes.json': ('get_recipes', 'set_recipes'),
    'pantry.json': ('get_pantry', 'set_pantry'),
    'plan.json': ('get_plan', 'set_plan'),
    'settings.json': ('get_settings', 'set_settings'),
}


class DataExporter:
    """Export stored data as a JSON document, a ZIP archive or CSV."""

    def __init__(self, storage: StorageService):
        self.storage = storage

    def export_document(self) -> Dict[str, Any]:
        """All stored resources in one JSON-serialisable document."""
        return {
            'metadata': {'export_date': datetime.now().isoformat(), 'version': EXPORT_VERSION},
            'recipes': self.storage.get_recipes(),
            'pantry': self.storage.get_pantry(),
            'plan': self.storage.get_plan(),
            'settings': self.storage.get_settings(),
        }

    def export_all(self, output_path: Optional[Path] = None) -> Optional[Path]:
        """Export all data as a ZIP archive (one JSON member per resource + metadata)."""
        if output_path is None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            output_path = Path(f"mealmate_backup_{timestamp}.zip")

        try:
            with zipfile.ZipFile(output_path, 'w', zipfile.ZIP_DEFLATED) as zipf:
                for member, (getter, _) in _RESOURCES.items():
                    value = getattr(self.storage, getter)()
                    zipf.writestr(member, json.dumps(value, indent=2, ensure_ascii=False))

                metadata = {
                    'export_date': datetime.now().isoformat(),
                    'version': EXPORT_VERSION,
                    'files': list(_RESOURCES),
                }
                zipf.writestr('metadata.json', json.dumps(metadata, indent=2))

            logger.info(f"Exported all data to {output_path}")
            return output_path
        except OSError as e:
            logger.error(f"Export failed: {e}")
            return None

    def write_grocery_csv(self, items: List[GroceryItem], stream: TextIO) -> None:
        """Write a grocery list as CSV rows (name, quantity, unit, category) to a text stream."""
        writer = csv.DictWriter(stream, fieldnames=['name', 'quantity', 'unit', 'category'])
        writer.writeheader()
        for item in items:
            writer.writerow({
                'name': item.name,
                'quantity': item.qty,
                'unit': item.unit,
                'category': item.category,
            })

    def export_grocery_csv(self, items: List[GroceryItem], output_path: Optional[Path] = None) -> Optional[Path]:
        """Export a grocery list to CSV for spreadsheet use."""
        if output_path is None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            output_path = Path(f"grocery_list_{timestamp}.csv")

        try:
            with open(output_path, 'w', newline='', encoding='utf-8') as csvfile:
                self.write_grocery_csv(items, csvfile)
            logger.info(f"Exported {len(items)} grocery items to CSV: {output_path}")
            return output_path
        except OSError as e:
            logger.error(f"CSV export failed: {e}")
            return None


class DataImporter:
    """Restore stored data from an export document, a recipes file or a ZIP archive."""

    def __init__(self, storage: StorageService):
        self.storage = storage

    def import_document(self, document: Dict[str, Any]) -> List[str]:
        """Write every resource present in the document; returns the names written."""
        written = []
        for member, (_, setter) in _RESOURCES.items():
            name = member[:-len('.json')]
            if name in document and document[name] is not None:
                getattr(self.storage, setter)(document[name])
                written.append(name)
        if written:
            self.storage.set_initialized()
        logger.info(f"Imported resources: {', '.join(written) or 'none'}")
        return written

    def import_recipes(self, input_path: Path, merge: bool = True) -> bool:
        """
        Import recipes from JSON file.

        Args:
            input_path: Path to JSON file containing a list of recipe records
            merge: If True, add only recipes whose id is new; if False, replace
        """
        try:
            with open(input_path, 'r', encoding='utf-8') as f:
                new_recipes = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Import failed: {e}")
            return False

        if merge:
            final_recipes = self.storage.get_recipes()
            existing_ids = {r.get('id') for r in final_recipes}
            for recipe in new_recipes:
                if recipe.get('id') not in existing_ids:
                    final_recipes.append(recipe)
            logger.info(f"Merged {len(new_recipes)} recipes with existing data")
        else:
            final_recipes = new_recipes
            logger.info(f"Importing {len(new_recipes)} recipes (replace mode)")

        return self.storage.set_recipes(final_recipes)

    def import_from_zip(self, zip_path: Path) -> bool:
        """Import all data from a ZIP backup."""
        try:
            document = {}
            with zipfile.ZipFile(zip_path, 'r') as zipf:
                for member in zipf.namelist():
                    if member in _RESOURCES:
                        document[member[:-len('.json')]] = json.loads(zipf.read(member))
        except (OSError, zipfile.BadZipFile, json.JSONDecodeError) as e:
            logger.error(f"Import from ZIP failed: {e}")
            return False

        self.import_document(document)
        logger.info(f"Successfully imported data from {zip_path}")
        return True


# CLI interface
if __name__ == "__main__":
    import argparse
    from mealmate.infra.grocery_snapshot import load_grocery_snapshot
    from mealmate.infra.paths import DATA_DIR
    from mealmate.infra.Storage_Service import JsonFileStore

    parser = argparse.ArgumentParser(description='Export/Import MealMate data')
    parser.add_argument('action', choices=['export', 'import'], help='Action to perform')
    parser.add_argument('--format', choices=['zip', 'csv'], default='zip',
                        help='Export format: full ZIP backup or the grocery list as CSV')
    parser.add_argument('--file', help='Input/output file path')
    parser.add_argument('--merge', action='store_true', help='Merge recipes with existing data on import')

    args = parser.parse_args()
    storage = StorageService(JsonFileStore(DATA_DIR))

    if args.action == 'export':
        exporter = DataExporter(storage)
        output = Path(args.file) if args.file else None
        if args.format == 'csv':
            result = exporter.export_grocery_csv(load_grocery_snapshot(storage).final_list, output)
        else:
            result = exporter.export_all(output)
        print(f"✓ Exported to: {result}")

    elif args.action == 'import':
        if not args.file:
            print("Error: --file is required for import")
            raise SystemExit(1)

        importer = DataImporter(storage)
        if args.file.endswith('.zip'):
            success = importer.import_from_zip(Path(args.file))
        else:
            success = importer.import_recipes(Path(args.file), merge=args.merge)

        if success:
            print(f"✓ Successfully imported from: {args.file}")
        else:
            print("✗ Import failed")
