import unittest
from decimal import Decimal

from apps.api.exceptions import ApplicationError
from apps.catalog.commands import FilterCommand
from apps.catalog.dtos import DROPSHIPPING, CatalogProduct, FilterCriteria
from apps.catalog.repositories import ProductRepository
from apps.catalog.services import ProductService


class FakeCache:
    def __init__(self):
        self.store = {}
        self.gets = 0

    def get(self, key):
        self.gets += 1
        return self.store.get(key)

    def set(self, key, value, timeout=None):
        self.store[key] = value


class ProductServiceTests(unittest.TestCase):
    def setUp(self):
        self.repo = ProductRepository()
        self.cache = FakeCache()
        self.service = ProductService(self.repo, self.cache)

    def test_list_without_query_returns_catalog_in_featured_order(self):
        products = self.service.list_products()
        self.assertEqual([p.id for p in products], [str(i) for i in range(1, 9)])

    def test_list_from_raw_params(self):
        products = self.service.list_products({"type": "dropshipping", "inStock": "1"})
        self.assertEqual([p.id for p in products], ["1", "3", "7"])

    def test_list_from_criteria_and_sort_key(self):
        criteria = FilterCriteria(type_filter=DROPSHIPPING)
        products = self.service.list_products(criteria, sort_key="price-high")
        self.assertEqual([p.id for p in products], ["5", "1", "3", "7"])

    def test_sort_key_overrides_command_without_mutating_it(self):
        command = FilterCommand(sort_key="featured")
        products = self.service.list_products(command, sort_key="price-low")
        self.assertEqual(products[0].id, "7")
        self.assertEqual(command.sort_key, "featured")

    def test_results_are_cached_as_ids(self):
        self.service.list_products({"q": "wireless"})
        self.assertEqual(len(self.cache.store), 1)
        self.assertEqual(list(self.cache.store.values())[0], ["1", "8"])
        # Second call is served from the cache even if the catalog changes.
        self.repo.save(
            CatalogProduct(
                id="9", name="Wireless Mouse", price=Decimal("19.99"),
                category="Electronics", type=DROPSHIPPING,
            )
        )
        products = self.service.list_products({"q": "wireless"})
        self.assertEqual([p.id for p in products], ["1", "8"])

    def test_different_sort_keys_use_different_cache_entries(self):
        self.service.list_products({}, sort_key="price-low")
        self.service.list_products({}, sort_key="price-high")
        self.assertEqual(len(self.cache.store), 2)

    def test_disable_cache_skips_backend(self):
        service = ProductService(self.repo, self.cache, disable_cache=True)
        service.list_products({"type": "affiliate"})
        self.assertEqual(self.cache.gets, 0)
        self.assertEqual(self.cache.store, {})

    def test_invalid_filter_becomes_validation_error(self):
        with self.assertRaises(ApplicationError) as ctx:
            self.service.list_products({"minPrice": "300", "maxPrice": "100"})
        self.assertEqual(ctx.exception.code, "VALIDATION_ERROR")
        self.assertEqual(ctx.exception.details["field"], "priceRange")

    def test_unknown_sort_is_rejected_before_cache_lookup(self):
        with self.assertRaises(ApplicationError) as ctx:
            self.service.list_products({"sort": "newest"})
        self.assertEqual(ctx.exception.details, {"field": "sort", "value": "newest"})
        self.assertEqual(self.cache.gets, 0)

    def test_get_product(self):
        self.assertEqual(self.service.get_product("4").name, "Professional DSLR Camera")
        self.assertIsNone(self.service.get_product("404"))

    def test_list_categories(self):
        self.assertEqual(self.service.list_categories()[:2], ["Electronics", "Fitness"])


class ProductRepositoryTests(unittest.TestCase):
    def test_seeded_catalog(self):
        repo = ProductRepository()
        self.assertEqual(len(repo), 8)
        self.assertFalse(repo.get("5").in_stock)
        self.assertEqual(repo.get(6).discount_percent, Decimal("20"))

    def test_custom_products_and_attribute_filters(self):
        repo = ProductRepository(
            [
                CatalogProduct(id="a", name="A", price="1", category="X", type="affiliate"),
                CatalogProduct(id="b", name="B", price="2", category="Y", type=DROPSHIPPING),
            ]
        )
        self.assertEqual([p.id for p in repo.list(type=DROPSHIPPING)], ["b"])
        self.assertTrue(repo.delete("a"))
        self.assertFalse(repo.delete("a"))
        self.assertIsNone(repo.get(None))
