import csv
import io
import unittest
from datetime import date
from pathlib import Path
from tempfile import TemporaryDirectory

from inventory.domain.Product import Product
from inventory.infra.csv_utils import export_filename, format_export_price, products_to_csv
from inventory.utilities.export_import import DataExporter

HEADER = "ID,Nome,Quantidade,Preco,Validade,Categoria,AlertaEstoqueBaixo\n"


class TestProductsToCsv(unittest.TestCase):

    def test_empty_collection_is_header_only(self):
        self.assertEqual(products_to_csv([]), HEADER)

    def test_rows_in_collection_order(self):
        products = [
            Product("2", "Sonho", 7, expiration_date="01/02/2025", category="Confeitaria", low_stock_threshold=5),
            Product("1", "Bolo", 3),
        ]
        self.assertEqual(products_to_csv(products), HEADER + "2,Sonho,7,,01/02/2025,Confeitaria,5\n1,Bolo,3,,,,\n")

    def test_price_with_comma_is_quoted(self):
        text = products_to_csv([Product("1", "Leite", 2, price=4.5)])
        self.assertEqual(text.splitlines()[1], '1,Leite,2,"4,50",,,')

    def test_delimiters_in_text_survive(self):
        products = [Product("1", 'Bolo, fatia "grande"', 1, price=12.0, category="Doces, tortas")]
        rows = list(csv.reader(io.StringIO(products_to_csv(products))))
        self.assertEqual(len(rows), 2)
        self.assertEqual(rows[1], ["1", 'Bolo, fatia "grande"', "1", "12,00", "", "Doces, tortas", ""])

    def test_zero_threshold_is_rendered(self):
        self.assertTrue(products_to_csv([Product("1", "A", 0, low_stock_threshold=0)]).endswith(",0\n"))

    def test_format_export_price(self):
        self.assertEqual(format_export_price(None), "")
        self.assertEqual(format_export_price(3), "3,00")
        self.assertEqual(format_export_price(2.675), "2,68")

    def test_format_export_price_extremes(self):
        self.assertEqual(format_export_price(1e30), "1000000000000000000000000000000,00")
        self.assertEqual(format_export_price(float("inf")), "")
        self.assertEqual(format_export_price(float("nan")), "")

    def test_export_filename(self):
        self.assertEqual(export_filename(date(2025, 3, 7)), "inventario_2025-03-07.csv")


class TestDataExporter(unittest.TestCase):

    def setUp(self):
        self._tmp = TemporaryDirectory()
        self.dir = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_export_csv_writes_file(self):
        exporter = DataExporter(self.dir / "share")
        outcome = exporter.export_csv([Product("1", "Pão de Fubá", 2)], date(2025, 3, 7))
        self.assertTrue(outcome.success)
        self.assertEqual(outcome.path.name, "inventario_2025-03-07.csv")
        self.assertEqual(outcome.path.read_text(encoding="utf-8"), HEADER + "1,Pão de Fubá,2,,,,\n")
        self.assertIsNone(outcome.notice)

    def test_sharing_unavailable(self):
        outcome = DataExporter(None).export_csv([])
        self.assertFalse(outcome.success)
        self.assertEqual(outcome.notice, "Compartilhamento não disponível neste dispositivo.")

    def test_write_failure_becomes_notice(self):
        blocker = self.dir / "file"
        blocker.write_text("x", encoding="utf-8")
        outcome = DataExporter(blocker / "sub").export_csv([])
        self.assertFalse(outcome.success)
        self.assertEqual(outcome.notice, "Ocorreu um erro ao exportar os dados.")

    def test_large_price_is_exported(self):
        outcome = DataExporter(self.dir).export_csv([Product("1", "Bolo", 1, price=1e30)], date(2025, 3, 7))
        self.assertTrue(outcome.success)
        self.assertEqual(outcome.path.read_text(encoding="utf-8").splitlines()[1],
                         '1,Bolo,1,"1000000000000000000000000000000,00",,,')

    def test_serialization_failure_becomes_notice(self):
        outcome = DataExporter(self.dir).export_csv([Product("1", "Bolo", 1, price="abc")], date(2025, 3, 7))
        self.assertFalse(outcome.success)
        self.assertEqual(outcome.notice, "Ocorreu um erro ao exportar os dados.")
        self.assertFalse((self.dir / "inventario_2025-03-07.csv").exists())
