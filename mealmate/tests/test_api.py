import unittest
from fastapi.testclient import TestClient
from mealmate.api.api_run import app
from mealmate.api.deps import get_storage
from mealmate.infra.Storage_Service import StorageService, MemoryStore
from mealmate.infra.seed import seed_if_needed
from mealmate.utilities.config import DEBUG


class ApiTestCase(unittest.TestCase):

    def setUp(self):
        self.storage = StorageService(MemoryStore())
        seed_if_needed(self.storage)
        app.dependency_overrides[get_storage] = lambda: self.storage
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()


class TestRecipesApi(ApiTestCase):

    def test_list_all(self):
        r = self.client.get('/api/recipes')
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()['count'], 6)

    def test_search_by_text(self):
        r = self.client.get('/api/recipes', params={'q': 'lentil'})
        self.assertEqual([x['id'] for x in r.json()['recipes']], ['r2'])

    def test_filter_by_tags(self):
        r = self.client.get('/api/recipes', params=[('tags', 'vegetarian'), ('tags', 'gluten-free')])
        self.assertEqual([x['id'] for x in r.json()['recipes']], ['r2', 'r5'])

    def test_unknown_tag_rejected(self):
        r = self.client.get('/api/recipes', params={'tags': 'keto'})
        self.assertEqual(r.status_code, 400)

    def test_tags(self):
        self.assertIn('vegan', self.client.get('/api/recipes/tags').json()['tags'])

    def test_detail_scaled(self):
        r = self.client.get('/api/recipes/r1', params={'servings': 8})
        self.assertEqual(r.status_code, 200)
        body = r.json()
        self.assertEqual(body['scaledServings'], 8)
        spaghetti = [i for i in body['ingredients'] if i['name'] == 'Spaghetti'][0]
        self.assertEqual(spaghetti['qty'], 800)

    def test_detail_missing(self):
        self.assertEqual(self.client.get('/api/recipes/nope').status_code, 404)


class TestGroceryApi(ApiTestCase):

    def test_list_with_pantry_deduction(self):
        body = self.client.get('/api/grocery-list').json()
        self.assertEqual(body['raw_count'], 29)
        self.assertEqual(body['count'], 26)
        items = {i['id']: i for i in body['items']}
        self.assertEqual(items['spaghetti']['qty'], 200)
        for gone in ('olive oil', 'egg', 'soy sauce'):
            self.assertNotIn(gone, items)
        self.assertAlmostEqual(body['cost'], 37.2)
        self.assertFalse(body['over_budget'])
        self.assertEqual(body['groups'][0]['category'], 'Produce')

    def test_list_without_deduction(self):
        body = self.client.get('/api/grocery-list', params={'deduct': False, 'grouped': False}).json()
        self.assertEqual(body['count'], 29)
        self.assertNotIn('groups', body)

    def test_corrupt_settings_fall_back_to_defaults(self):
        self.storage.store.set('mealmate_settings', '[1, 2]')
        r = self.client.get('/api/grocery-list')
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()['budget'], 40)
        self.assertEqual(self.client.get('/api/plan/cost').status_code, 200)

    def test_csv(self):
        r = self.client.get('/api/grocery-list/csv')
        self.assertEqual(r.status_code, 200)
        self.assertTrue(r.headers['content-type'].startswith('text/csv'))
        lines = r.text.splitlines()
        self.assertEqual(lines[0], 'name,quantity,unit,category')
        self.assertEqual(len(lines), 27)

    def test_pdf(self):
        r = self.client.get('/api/grocery-list/pdf')
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.headers['content-type'], 'application/pdf')
        self.assertTrue(r.content.startswith(b'%PDF'))


class TestPlanApi(ApiTestCase):

    def test_get_plan(self):
        body = self.client.get('/api/plan').json()
        self.assertEqual(body['plan']['Monday']['dinner'], 'r1')
        self.assertEqual(body['summary']['planned_meals'], 7)
        self.assertEqual(body['summary']['total_slots'], 21)

    def test_assign_and_clear(self):
        r = self.client.put('/api/plan/slot', json={'day': 'Friday', 'meal': 'lunch', 'recipe_id': 'r2'})
        self.assertEqual(r.json()['plan']['Friday']['lunch'], 'r2')
        r = self.client.delete('/api/plan/slot/Friday/lunch')
        self.assertIsNone(r.json()['plan']['Friday']['lunch'])

    def test_assign_unknown_recipe(self):
        r = self.client.put('/api/plan/slot', json={'day': 'Friday', 'meal': 'lunch', 'recipe_id': 'r99'})
        self.assertEqual(r.status_code, 404)

    def test_assign_bad_day(self):
        r = self.client.put('/api/plan/slot', json={'day': 'Funday', 'meal': 'lunch', 'recipe_id': 'r2'})
        self.assertEqual(r.status_code, 422)

    def test_clear_bad_slot(self):
        self.assertEqual(self.client.delete('/api/plan/slot/Monday/brunch').status_code, 400)

    def test_move_empty_slot(self):
        r = self.client.post('/api/plan/move', json={
            'from_day': 'Friday', 'from_meal': 'dinner', 'to_day': 'Monday', 'to_meal': 'lunch'})
        self.assertEqual(r.status_code, 400)

    def test_reset(self):
        body = self.client.post('/api/plan/reset').json()
        self.assertEqual(body['summary']['planned_meals'], 0)
        self.assertEqual(self.client.get('/api/grocery-list').json()['count'], 0)

    def test_budget_and_cost(self):
        self.client.put('/api/plan/budget', json={'budget': 30})
        cost = self.client.get('/api/plan/cost').json()
        self.assertEqual(cost['budget'], 30)
        self.assertTrue(cost['over_budget'])
        self.assertTrue(self.client.get('/api/grocery-list').json()['over_budget'])

    def test_negative_budget(self):
        self.assertEqual(self.client.put('/api/plan/budget', json={'budget': -1}).status_code, 422)


class TestPantryApi(ApiTestCase):

    def test_list(self):
        body = self.client.get('/api/pantry').json()
        self.assertEqual(body['count'], 4)

    def test_add_merges(self):
        r = self.client.post('/api/pantry', json={'name': 'spaghetti', 'qty': 300, 'unit': 'g'})
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()['id'], 'p2')
        self.assertEqual(r.json()['qty'], 500)
        # Enough spaghetti now; it drops off the grocery list
        ids = [i['id'] for i in self.client.get('/api/grocery-list').json()['items']]
        self.assertNotIn('spaghetti', ids)

    def test_add_invalid(self):
        r = self.client.post('/api/pantry', json={'name': '  ', 'qty': 1, 'unit': 'g'})
        self.assertEqual(r.status_code, 422)
        r = self.client.post('/api/pantry', json={'name': 'Salt', 'qty': 0, 'unit': 'g'})
        self.assertEqual(r.status_code, 422)

    def test_update_and_delete(self):
        r = self.client.put('/api/pantry/p3', json={'qty': 2})
        self.assertEqual(r.json()['qty'], 2)
        self.assertEqual(self.client.put('/api/pantry/zzz', json={'qty': 2}).status_code, 404)
        self.assertEqual(self.client.delete('/api/pantry/p4').status_code, 200)
        self.assertEqual(self.client.delete('/api/pantry/p4').status_code, 404)
        self.assertEqual(self.client.get('/api/pantry').json()['count'], 3)


class TestAppConfig(unittest.TestCase):

    def test_debug_flag_from_config(self):
        self.assertEqual(app.debug, DEBUG)


class TestExportImportApi(ApiTestCase):

    def test_round_trip(self):
        document = self.client.get('/api/export').json()
        self.storage.clear_all()
        r = self.client.post('/api/import', json=document)
        self.assertEqual(r.json()['imported'], ['recipes', 'pantry', 'plan', 'settings'])
        self.assertEqual(self.client.get('/api/recipes').json()['count'], 6)

    def test_import_rejects_recipes_without_id(self):
        r = self.client.post('/api/import', json={'recipes': [{'name': 'No id'}]})
        self.assertEqual(r.status_code, 422)


if __name__ == '__main__':
    unittest.main()
