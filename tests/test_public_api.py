import unittest

import webdavfile


class TestPublicApi(unittest.TestCase):
    def test_top_level_exports_exist(self) -> None:
        self.assertTrue(hasattr(webdavfile, "parse_response"))
        self.assertTrue(hasattr(webdavfile, "normalize_path"))
        self.assertTrue(hasattr(webdavfile, "WebDAVFile"))
        self.assertTrue(hasattr(webdavfile, "AccountInfo"))

        self.assertTrue(hasattr(webdavfile, "WebDAVFileError"))
        self.assertTrue(hasattr(webdavfile, "InvalidRecordError"))

    def test___all___is_defined(self) -> None:
        self.assertTrue(hasattr(webdavfile, "__all__"))
        self.assertIn("parse_response", webdavfile.__all__)
        self.assertIn("WebDAVFileError", webdavfile.__all__)


if __name__ == "__main__":
    unittest.main()
