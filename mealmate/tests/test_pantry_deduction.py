import unittest
from mealmate.domain.GroceryItem import GroceryItem
from mealmate.domain.Pantry import PantryItem
from mealmate.logic.shopping.pantry_deduction import deduct_pantry


class TestDeductPantry(unittest.TestCase):

    def setUp(self):
        self.grocery_list = [
            GroceryItem('olive oil', 'Olive oil', 30, 'ml', 'Condiments'),
            GroceryItem('chicken breast', 'Chicken breast', 500, 'g', 'Meat'),
            GroceryItem('spaghetti', 'Spaghetti', 200, 'g', 'Dry Goods'),
        ]

    def _find(self, items, key):
        return next((i for i in items if i.canonical_name == key), None)

    def test_fully_covered_item_is_removed(self):
        pantry = [PantryItem('p1', 'Olive oil', 500, 'ml')]
        result = deduct_pantry(self.grocery_list, pantry)
        self.assertIsNone(self._find(result, 'olive oil'))

    def test_partially_covered_item_shows_remaining(self):
        pantry = [PantryItem('p2', 'Chicken breast', 200, 'g')]
        chicken = self._find(deduct_pantry(self.grocery_list, pantry), 'chicken breast')
        self.assertIsNotNone(chicken)
        self.assertEqual((chicken.qty, chicken.unit), (300, 'g'))
        self.assertEqual((chicken.name, chicken.category), ('Chicken breast', 'Meat'))

    def test_item_not_in_pantry_is_unchanged(self):
        spaghetti = self._find(deduct_pantry(self.grocery_list, []), 'spaghetti')
        self.assertEqual(spaghetti.qty, 200)

    def test_exact_coverage_removes_item(self):
        pantry = [PantryItem('p3', 'spaghetti', 200, 'g')]
        self.assertIsNone(self._find(deduct_pantry(self.grocery_list, pantry), 'spaghetti'))

    def test_pantry_entries_are_summed_across_units(self):
        pantry = [
            PantryItem('p4', 'Olive Oil', 1, 'tbsp'),
            PantryItem('p5', 'olive oil', 5, 'ml'),
        ]
        oil = self._find(deduct_pantry(self.grocery_list, pantry), 'olive oil')
        self.assertEqual(oil.qty, 10)

    def test_pantry_name_is_normalised(self):
        grocery = [GroceryItem('egg', 'Eggs', 6, 'pcs', 'Dairy & Eggs')]
        result = deduct_pantry(grocery, [PantryItem('p6', 'Eggs', 4, 'pcs')])
        self.assertEqual(result[0].qty, 2)

    def test_mismatched_dimension_leaves_item_unchanged(self):
        # Pantry holds spaghetti by count, list needs grams
        pantry = [PantryItem('p7', 'Spaghetti', 1, 'pcs')]
        spaghetti = self._find(deduct_pantry(self.grocery_list, pantry), 'spaghetti')
        self.assertEqual((spaghetti.qty, spaghetti.unit), (200, 'g'))

    def test_input_list_is_not_mutated(self):
        deduct_pantry(self.grocery_list, [PantryItem('p2', 'Chicken breast', 200, 'g')])
        self.assertEqual(self.grocery_list[1].qty, 500)
        self.assertEqual(len(self.grocery_list), 3)

    def test_result_is_rounded(self):
        grocery = [GroceryItem('milk', 'Milk', 0.3, 'ml', 'Dairy & Eggs')]
        result = deduct_pantry(grocery, [PantryItem('p8', 'Milk', 0.1, 'ml')])
        self.assertEqual(result[0].qty, 0.2)
