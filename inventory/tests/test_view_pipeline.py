import random
import unittest
from inventory.domain.Product import Product
from inventory.logic.view.pipeline import (
    SortConfig, derive, filter_by_category, filter_by_search, list_categories, next_sort_config, sort_products
)


def _ids(products):
    return [p.id for p in products]


class TestSortProducts(unittest.TestCase):

    def test_quantity_desc_then_asc(self):
        products = [Product("a", "A", 5), Product("b", "B", 1), Product("c", "C", 10)]
        self.assertEqual([p.quantity for p in sort_products(products, "quantity", "desc")], [10, 5, 1])
        self.assertEqual([p.quantity for p in sort_products(products, "quantity", "asc")], [1, 5, 10])

    def test_name_is_case_and_accent_insensitive(self):
        products = [Product("1", "bolo", 1), Product("2", "Açúcar", 1), Product("3", "Café", 1),
                    Product("4", "Biscoito", 1), Product("5", "azeite", 1)]
        self.assertEqual([p.name for p in sort_products(products, "name", "asc")],
                         ["Açúcar", "azeite", "Biscoito", "bolo", "Café"])
        self.assertEqual([p.name for p in sort_products(products, "name", "desc")],
                         ["Café", "bolo", "Biscoito", "azeite", "Açúcar"])

    def test_missing_dates_last_in_both_directions(self):
        products = [
            Product("none", "N", 1),
            Product("late", "L", 1, expiration_date="01/06/2025"),
            Product("bad", "B", 1, expiration_date="2025-01-01"),
            Product("early", "E", 1, expiration_date="15/01/2025"),
            Product("mid", "M", 1, expiration_date="28/02/2025"),
        ]
        self.assertEqual(_ids(sort_products(products, "expirationDate", "asc")),
                         ["early", "mid", "late", "none", "bad"])
        self.assertEqual(_ids(sort_products(products, "expirationDate", "desc")),
                         ["late", "mid", "early", "none", "bad"])

    def test_dates_compare_chronologically_not_lexically(self):
        products = [Product("x", "X", 1, expiration_date="02/01/2025"),
                    Product("y", "Y", 1, expiration_date="01/02/2024")]
        self.assertEqual(_ids(sort_products(products, "expirationDate", "asc")), ["y", "x"])

    def test_sort_is_stable_for_ties(self):
        products = [Product(str(i), "Same", 3) for i in range(5)]
        self.assertEqual(_ids(sort_products(products, "quantity", "asc")), ["0", "1", "2", "3", "4"])
        self.assertEqual(_ids(sort_products(products, "quantity", "desc")), ["0", "1", "2", "3", "4"])

    def test_unknown_key_rejected(self):
        with self.assertRaises(ValueError):
            sort_products([], "price", "asc")
        with self.assertRaises(ValueError):
            sort_products([], "name", "up")

    def test_input_not_mutated(self):
        products = [Product("b", "B", 2), Product("a", "A", 1)]
        sort_products(products, "name", "asc")
        self.assertEqual(_ids(products), ["b", "a"])


class TestFilters(unittest.TestCase):

    def setUp(self):
        self.products = [
            Product("1", "Pão Francês", 10, category="Panificação"),
            Product("2", "Pão de Milho", 4, category="Panificação"),
            Product("3", "Suco de Laranja", 8, category="Bebidas"),
            Product("4", "Sonho Doce", 2),
        ]

    def test_all_category_disables_filter(self):
        self.assertEqual(len(filter_by_category(self.products, "Todos")), 4)
        self.assertEqual(len(filter_by_category(self.products, None)), 4)

    def test_category_exact_match(self):
        self.assertEqual(_ids(filter_by_category(self.products, "Panificação")), ["1", "2"])
        self.assertEqual(filter_by_category(self.products, "panificação"), [])

    def test_search_case_insensitive_substring(self):
        self.assertEqual(_ids(filter_by_search(self.products, "PÃO")), ["1", "2"])
        self.assertEqual(_ids(filter_by_search(self.products, "laranja")), ["3"])
        self.assertEqual(len(filter_by_search(self.products, "")), 4)

    def test_derive_composes(self):
        result = derive(self.products, search_text="pão", active_category="Panificação",
                        sort_key="quantity", sort_direction="asc")
        self.assertEqual(_ids(result), ["2", "1"])

    def test_derive_defaults(self):
        self.assertEqual(_ids(derive(self.products)), ["2", "1", "4", "3"])


class TestDeriveProperties(unittest.TestCase):

    def _random_products(self, rng):
        names = ["Pão", "bolo", "Torta", "leite", "Queijo", "Café", "Açúcar"]
        categories = ["Bebidas", "Mercearia", None]
        products = []
        for i in range(rng.randint(0, 25)):
            day = rng.choice(["01/02/2025", "15/03/2024", "31/12/2025", "bad", None])
            products.append(Product(f"p{i}", f"{rng.choice(names)} {i}", rng.randint(0, 50),
                                    expiration_date=day, category=rng.choice(categories)))
        return products

    def test_filtered_output_is_ordered_subset(self):
        rng = random.Random(42)
        for _ in range(50):
            products = self._random_products(rng)
            for key in ("name", "quantity", "expirationDate"):
                for direction in ("asc", "desc"):
                    full = _ids(sort_products(products, key, direction))
                    result = _ids(derive(products, search_text=rng.choice(["", "o", "Pão", "1"]),
                                         active_category=rng.choice(["Todos", "Bebidas", "Mercearia"]),
                                         sort_key=key, sort_direction=direction))
                    self.assertLessEqual(len(result), len(products))
                    positions = [full.index(pid) for pid in result]
                    self.assertEqual(positions, sorted(positions))


class TestSortToggleAndCategories(unittest.TestCase):

    def test_same_key_flips_direction(self):
        config = SortConfig("quantity", "asc")
        config = next_sort_config(config, "quantity")
        self.assertEqual(config, SortConfig("quantity", "desc"))
        config = next_sort_config(config, "quantity")
        self.assertEqual(config, SortConfig("quantity", "asc"))

    def test_new_key_resets_to_asc(self):
        self.assertEqual(next_sort_config(SortConfig("name", "desc"), "expirationDate"),
                         SortConfig("expirationDate", "asc"))

    def test_default_config(self):
        self.assertEqual(SortConfig(), SortConfig("name", "asc"))

    def test_list_categories(self):
        products = [Product("1", "A", 1, category="Bebidas"), Product("2", "B", 1),
                    Product("3", "C", 1, category="Mercearia"), Product("4", "D", 1, category="Bebidas")]
        self.assertEqual(list_categories(products), ["Todos", "Bebidas", "Mercearia"])
        self.assertEqual(list_categories([]), ["Todos"])
