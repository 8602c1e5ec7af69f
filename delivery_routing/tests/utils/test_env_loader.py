import unittest
import os
import tempfile
from delivery_routing.utils.env_loader import load_env_from_file


class TestEnvLoader(unittest.TestCase):

    def setUp(self):
        # Store original environment variables to restore them later
        self.original_environ = os.environ.copy()
        self.temp_dir = tempfile.TemporaryDirectory()
        self.test_env_file_path = os.path.join(self.temp_dir.name, ".env.test")

    def tearDown(self):
        os.environ.clear()
        os.environ.update(self.original_environ)
        self.temp_dir.cleanup()

    def create_test_env_file(self, content):
        with open(self.test_env_file_path, 'w') as f:
            f.write(content)

    def test_load_env_successful(self):
        self.create_test_env_file(
            "DELIVERY_TEST_KEY1=value1\n"
            "# A comment\n"
            "  DELIVERY_TEST_KEY2 =  value with spaces  \n"
            "\n"
            "NOT_A_PAIR\n"
            "DELIVERY_TEST_EMPTY=\n"
            "DELIVERY_TEST_URL=http://host/?a=b\n"
        )

        with self.assertLogs('delivery_routing.utils.env_loader', level='INFO') as cm:
            self.assertTrue(load_env_from_file(self.test_env_file_path))

        self.assertIn(f"Loaded environment variables from {self.test_env_file_path}", cm.output[0])
        self.assertEqual(os.environ["DELIVERY_TEST_KEY1"], "value1")
        self.assertEqual(os.environ["DELIVERY_TEST_KEY2"], "value with spaces")
        self.assertEqual(os.environ["DELIVERY_TEST_EMPTY"], "")
        self.assertEqual(os.environ["DELIVERY_TEST_URL"], "http://host/?a=b")
        self.assertNotIn("NOT_A_PAIR", os.environ)

    def test_load_env_file_not_found(self):
        missing = os.path.join(self.temp_dir.name, "missing.env")
        self.assertFalse(load_env_from_file(missing))

    def test_load_env_without_override_keeps_existing(self):
        os.environ["DELIVERY_DEPOT_NAME"] = "Kitchen"
        self.create_test_env_file("DELIVERY_DEPOT_NAME=Warehouse\nDELIVERY_TEST_NEW=1\n")

        self.assertTrue(load_env_from_file(self.test_env_file_path, override=False))

        self.assertEqual(os.environ["DELIVERY_DEPOT_NAME"], "Kitchen")
        self.assertEqual(os.environ["DELIVERY_TEST_NEW"], "1")

    def test_load_env_with_override(self):
        os.environ["DELIVERY_DEPOT_NAME"] = "Kitchen"
        self.create_test_env_file("DELIVERY_DEPOT_NAME=Warehouse\n")

        self.assertTrue(load_env_from_file(self.test_env_file_path))

        self.assertEqual(os.environ["DELIVERY_DEPOT_NAME"], "Warehouse")

    def test_load_env_read_error(self):
        # A directory exists but cannot be opened as a file
        with self.assertLogs('delivery_routing.utils.env_loader', level='ERROR') as cm:
            self.assertFalse(load_env_from_file(self.temp_dir.name))
        self.assertIn("Error loading environment variables", cm.output[0])


if __name__ == '__main__':
    unittest.main()
