import sys
import os
import unittest
import tempfile
from types import SimpleNamespace

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

from ipaccess.data import AccessConfig
from ipaccess.fastapi_utils import fastapi_req_to_request, validate_admin_request
from ipaccess.no_access import NO_ACCESS_BODY

class TestFastApiUtils(unittest.TestCase):
    def setUp(self):
        self.config = AccessConfig(True, ("192.168.1.50-100",))

    def make_request(self, headers:dict, peer:str = None):
        return SimpleNamespace(
            method="GET",
            url=SimpleNamespace(path="/admin"),
            headers=headers,
            client=SimpleNamespace(host=peer) if peer else None,
        )

    def test_to_request_uses_peer(self):
        request = fastapi_req_to_request(self.make_request({}, "192.168.1.60"))
        self.assertEqual(request.client_ip, "192.168.1.60")
        self.assertEqual(request.path(), "/admin")

    def test_to_request_prefers_headers(self):
        request = fastapi_req_to_request(self.make_request({"x-client-ip": "10.0.0.1"}, "192.168.1.60"))
        self.assertEqual(request.client_ip, "10.0.0.1")

    def test_allowed(self):
        allowed, result, response = validate_admin_request(self.make_request({}, "192.168.1.60"), self.config)
        self.assertTrue(allowed)
        self.assertEqual(result.rule, "range")
        self.assertIsNone(response)

    def test_denied(self):
        allowed, result, response = validate_admin_request(self.make_request({}, "192.168.1.101"), self.config)
        self.assertFalse(allowed)
        self.assertIsNone(result.matched_entry)
        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.body.decode("utf-8"), NO_ACCESS_BODY)

    def test_denied_with_error_page(self):
        with tempfile.TemporaryDirectory() as tmp:
            page = os.path.join(tmp, "403.html")
            with open(page, "w", encoding="utf-8") as f:
                f.write("<h1>Not here</h1>")
            allowed, _, response = validate_admin_request(self.make_request({}, "8.8.8.8"), self.config, error_page=page)
        self.assertFalse(allowed)
        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.body.decode("utf-8"), "<h1>Not here</h1>")
