import unittest

from models.book import Book, BookUpdate, ValidationMode
from validators.validator_books import validate_book


class TestValidateBook(unittest.TestCase):
    def setUp(self):
        self.fields = {
            "amazon_url": "https://amazon/test2",
            "author": "Eric",
            "language": "english",
            "pages": 400,
            "publisher": "Who let the dogs out! Publishers",
            "title": "Subpoena's",
            "year": 2023,
        }

    def test_create_accepts_complete_book(self):
        result = validate_book({"isbn": "987654321", **self.fields}, ValidationMode.CREATE)

        self.assertTrue(result.is_valid)
        self.assertIsInstance(result.book, Book)
        self.assertEqual(result.book.isbn, "987654321")

    def test_create_requires_isbn(self):
        result = validate_book(self.fields, ValidationMode.CREATE)

        self.assertFalse(result.is_valid)
        self.assertIsNone(result.book)
        self.assertEqual(result.errors, ["isbn: Field required"])

    def test_create_reports_every_missing_field(self):
        result = validate_book({"year": 2000}, ValidationMode.CREATE)

        self.assertEqual(len(result.errors), 7)

    def test_wrong_type_is_rejected(self):
        result = validate_book({"isbn": "987654321", **self.fields, "pages": "400"}, ValidationMode.CREATE)

        self.assertFalse(result.is_valid)
        self.assertTrue(result.errors[0].startswith("pages:"))

    def test_boolean_is_not_an_integer(self):
        result = validate_book({**self.fields, "year": True}, ValidationMode.UPDATE)

        self.assertFalse(result.is_valid)

    def test_update_accepts_mutable_fields(self):
        result = validate_book(self.fields, ValidationMode.UPDATE)

        self.assertTrue(result.is_valid)
        self.assertIsInstance(result.book, BookUpdate)

    def test_update_rejects_isbn(self):
        result = validate_book({"isbn": "987654321", **self.fields}, ValidationMode.UPDATE)

        self.assertEqual(result.errors, ["isbn: Extra inputs are not permitted"])

    def test_update_rejects_unknown_field(self):
        result = validate_book({**self.fields, "invalidfield": "I AM NO VALID"}, ValidationMode.UPDATE)

        self.assertEqual(result.errors, ["invalidfield: Extra inputs are not permitted"])

    def test_non_object_payload(self):
        for payload in (None, [], "book", 42):
            with self.subTest(payload=payload):
                result = validate_book(payload, ValidationMode.CREATE)
                self.assertEqual(result.errors, ["Request body must be a JSON object"])

    def test_mode_accepts_plain_value(self):
        self.assertTrue(validate_book(self.fields, "update").is_valid)

    def test_unknown_mode_is_a_violation(self):
        result = validate_book(self.fields, "upsert")

        self.assertFalse(result.is_valid)
        self.assertEqual(result.errors, ["Unknown validation mode: upsert"])


if __name__ == "__main__":
    unittest.main()
