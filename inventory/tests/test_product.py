import unittest
from inventory.domain.Product import Movement, Product


class TestProduct(unittest.TestCase):

    def test_round_trip_dict(self):
        data = {
            "id": "p1", "name": "Pão Francês", "quantity": 12, "price": 0.75,
            "expirationDate": "20/05/2025", "imageUri": "file:///pao.jpg",
            "category": "Panificação", "lowStockThreshold": 10,
            "history": [{"id": "m1", "date": "2025-05-01", "type": "entrada", "quantityChange": 12}],
        }
        product = Product.from_dict(data)
        self.assertEqual(product.expiration_date, "20/05/2025")
        self.assertEqual(product.history, [Movement("m1", "2025-05-01", "entrada", 12)])
        self.assertEqual(product.to_dict(), data)

    def test_absent_fields_are_omitted(self):
        product = Product("p2", "Bolo", 3)
        self.assertEqual(product.to_dict(), {"id": "p2", "name": "Bolo", "quantity": 3, "history": []})

    def test_from_dict_ignores_unknown_keys(self):
        product = Product.from_dict({"id": "p3", "name": "Suco", "quantity": 1, "color": "red"})
        self.assertEqual(product.name, "Suco")
        self.assertIsNone(product.price)

    def test_is_low_stock(self):
        self.assertTrue(Product("a", "A", 5, low_stock_threshold=10).is_low_stock())
        self.assertTrue(Product("b", "B", 10, low_stock_threshold=10).is_low_stock())
        self.assertFalse(Product("c", "C", 11, low_stock_threshold=10).is_low_stock())
        self.assertFalse(Product("d", "D", 0).is_low_stock())
        self.assertTrue(Product("e", "E", 0, low_stock_threshold=0).is_low_stock())

    def test_apply_fields_rejects_identity(self):
        product = Product("p4", "Leite", 2)
        with self.assertRaises(ValueError):
            product.apply_fields({"id": "other"})
        product.apply_fields({"expirationDate": "01/01/2030", "price": None})
        self.assertEqual(product.expiration_date, "01/01/2030")

    def test_movement_type_is_checked(self):
        with self.assertRaises(ValueError):
            Movement("m", "2025-01-01", "sideways", 1)
