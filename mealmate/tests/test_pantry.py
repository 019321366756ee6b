import unittest
from mealmate.domain.Pantry import Pantry, PantryItem


class TestPantry(unittest.TestCase):

    def setUp(self):
        ids = iter(['p100', 'p101', 'p102'])
        self.pantry = Pantry([PantryItem('p1', 'Olive oil', 500, 'ml')], id_factory=lambda: next(ids))

    def test_add_new_item(self):
        item = self.pantry.add_item('  Rice ', 1, 'kg')
        self.assertEqual((item.id, item.name, item.qty, item.unit), ('p100', 'Rice', 1, 'kg'))
        self.assertIn(item, self.pantry.get_items())

    def test_add_merges_same_name_and_unit(self):
        item = self.pantry.add_item('olive OIL', 250.5, 'ml')
        self.assertEqual(item.id, 'p1')
        self.assertEqual(item.qty, 750.5)
        self.assertEqual(len(self.pantry.get_items()), 1)

    def test_add_with_other_unit_creates_new_entry(self):
        self.pantry.add_item('Olive oil', 1, 'L')
        self.assertEqual(len(self.pantry.get_items()), 2)

    def test_add_validates_input(self):
        with self.assertRaises(ValueError):
            self.pantry.add_item('   ', 1, 'g')
        with self.assertRaises(ValueError):
            self.pantry.add_item('Salt', 0, 'g')

    def test_remove_item(self):
        self.pantry.remove_item('p1')
        self.assertEqual(self.pantry.get_items(), [])
        with self.assertRaises(KeyError):
            self.pantry.remove_item('p1')

    def test_update_quantity(self):
        self.pantry.update_quantity('p1', 120)
        self.assertEqual(self.pantry.get('p1').qty, 120)
        with self.assertRaises(ValueError):
            self.pantry.update_quantity('p1', -1)

    def test_default_ids_are_time_based(self):
        item = Pantry().add_item('Salt', 1, 'g')
        self.assertTrue(item.id.startswith('p'))
        self.assertTrue(item.id[1:].isdigit())

    def test_dict_round_trip(self):
        data = self.pantry.to_dict()
        self.assertEqual(data, [{'id': 'p1', 'name': 'Olive oil', 'qty': 500, 'unit': 'ml'}])
        self.assertEqual(Pantry.from_dict(data).to_dict(), data)
