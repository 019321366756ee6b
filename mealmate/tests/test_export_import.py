import csv
import io
import tempfile
import unittest
from pathlib import Path
from mealmate.domain.GroceryItem import GroceryItem
from mealmate.infra.grocery_snapshot import load_grocery_snapshot
from mealmate.infra.Storage_Service import StorageService, MemoryStore
from mealmate.infra.seed import seed_if_needed
from mealmate.utilities.export_import import DataExporter, DataImporter


class TestExportImport(unittest.TestCase):

    def setUp(self):
        self.source = StorageService(MemoryStore())
        seed_if_needed(self.source)
        self.target = StorageService(MemoryStore())

    def test_document_round_trip(self):
        document = DataExporter(self.source).export_document()
        self.assertIn('metadata', document)
        written = DataImporter(self.target).import_document(document)
        self.assertEqual(written, ['recipes', 'pantry', 'plan', 'settings'])
        self.assertEqual(self.target.get_recipes(), self.source.get_recipes())
        self.assertEqual(self.target.get_plan(), self.source.get_plan())
        self.assertTrue(self.target.is_initialized())

    def test_zip_round_trip(self):
        with tempfile.TemporaryDirectory() as tmp:
            archive = DataExporter(self.source).export_all(Path(tmp) / 'backup.zip')
            self.assertIsNotNone(archive)
            self.assertTrue(DataImporter(self.target).import_from_zip(archive))
        self.assertEqual(self.target.get_pantry(), self.source.get_pantry())

    def test_import_from_bad_zip_fails(self):
        with tempfile.TemporaryDirectory() as tmp:
            bogus = Path(tmp) / 'bogus.zip'
            bogus.write_text('not a zip', encoding='utf-8')
            self.assertFalse(DataImporter(self.target).import_from_zip(bogus))

    def test_import_recipes_merge_skips_known_ids(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / 'recipes.json'
            path.write_text('[{"id": "r1", "name": "Dup"}, {"id": "r9", "name": "New"}]', encoding='utf-8')
            self.assertTrue(DataImporter(self.source).import_recipes(path, merge=True))
        ids = [r['id'] for r in self.source.get_recipes()]
        self.assertEqual(ids.count('r1'), 1)
        self.assertIn('r9', ids)

    def test_grocery_csv(self):
        items = [GroceryItem('tomato', 'Tomatoes', 3, 'pcs', 'Produce')]
        with tempfile.TemporaryDirectory() as tmp:
            path = DataExporter(self.source).export_grocery_csv(items, Path(tmp) / 'list.csv')
            with open(path, newline='', encoding='utf-8') as f:
                rows = list(csv.DictReader(f))
        self.assertEqual(rows, [{'name': 'Tomatoes', 'quantity': '3', 'unit': 'pcs', 'category': 'Produce'}])

    def test_grocery_csv_of_stored_plan(self):
        snapshot = load_grocery_snapshot(self.source)
        self.assertEqual((len(snapshot.raw_list), len(snapshot.final_list)), (29, 26))
        buffer = io.StringIO()
        DataExporter(self.source).write_grocery_csv(snapshot.final_list, buffer)
        rows = list(csv.DictReader(io.StringIO(buffer.getvalue())))
        spaghetti = [r for r in rows if r['name'] == 'Spaghetti'][0]
        self.assertEqual((spaghetti['quantity'], spaghetti['unit']), ('200.0', 'g'))
