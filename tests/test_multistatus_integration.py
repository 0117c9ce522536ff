import unittest
from xml.etree.ElementTree import fromstring

from webdavfile import AccountInfo, WebDAVFile, parse_response

MULTISTATUS = """<?xml version="1.0"?>
<d:multistatus xmlns:d="DAV:" xmlns:oc="http://owncloud.org/ns">
  <d:response>
    <d:href>/remote.php/dav/files/alice/</d:href>
    <d:propstat>
      <d:prop>
        <d:getlastmodified>Mon, 06 Jan 2025 10:00:00 GMT</d:getlastmodified>
        <d:resourcetype><d:collection/></d:resourcetype>
        <oc:fileid>1</oc:fileid>
        <d:getetag>"root"</d:getetag>
      </d:prop>
      <d:status>HTTP/1.1 200 OK</d:status>
    </d:propstat>
  </d:response>
  <d:response>
    <d:href>/remote.php/dav/files/alice/Notes%20and%20Drafts/todo.md</d:href>
    <d:propstat>
      <d:prop>
        <d:getlastmodified>Tue, 07 Jan 2025 08:30:15 GMT</d:getlastmodified>
        <d:resourcetype/>
        <d:getcontentlength>512</d:getcontentlength>
        <oc:fileid>17</oc:fileid>
        <d:getetag>"a1b2"</d:getetag>
      </d:prop>
      <d:status>HTTP/1.1 200 OK</d:status>
    </d:propstat>
  </d:response>
  <d:response>
    <d:href>/remote.php/dav/files/alice/broken.txt</d:href>
    <d:propstat>
      <d:prop>
        <d:getlastmodified>sometime</d:getlastmodified>
      </d:prop>
      <d:status>HTTP/1.1 200 OK</d:status>
    </d:propstat>
  </d:response>
</d:multistatus>
"""


class TestMultistatusIntegration(unittest.TestCase):
    def test_listing_skips_invalid_entries(self) -> None:
        account = AccountInfo(
            base_url="https://cloud.example.com/remote.php/dav/files/alice/",
            username="alice",
        )
        root = fromstring(MULTISTATUS)

        files: list[WebDAVFile] = []
        for entry in root.findall("{DAV:}response"):
            info = parse_response(entry, account.base_path)
            if info is not None:
                files.append(info)

        self.assertEqual([f.path for f in files], ["", "Notes and Drafts/todo.md"])

        root_dir, todo = files
        self.assertTrue(root_dir.is_directory)
        self.assertEqual(root_dir.id, "1")

        self.assertFalse(todo.is_directory)
        self.assertEqual(todo.size, 512)
        self.assertEqual(todo.etag, '"a1b2"')
        self.assertEqual(todo.name, "todo")
        self.assertEqual(todo.extension, "md")
        self.assertEqual(WebDAVFile.from_dict(todo.to_dict()), todo)


if __name__ == "__main__":
    unittest.main()
