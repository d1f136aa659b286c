import hashlib
import os
import tempfile
import unittest

from sitesync.config import ScanOptions, SyncOptions
from sitesync.errors import ConfigurationError, ScanError
from sitesync.local import file_md5, scan_local
from sitesync.models import RemoteObject
from sitesync.plan import Action, build_sync_plan


class TestLocalScanner(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = self._tmp.name
        self._write("index.html", b"<html></html>")
        self._write("global.css", b"body{}")
        self._write("assets/app.js", b"console.log(1)")
        self._write("assets/app.js.map", b"{}")
        self._write(".hidden/secret.txt", b"s")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _write(self, rel: str, data: bytes) -> None:
        path = os.path.join(self.root, *rel.split("/"))
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "wb") as f:
            f.write(data)

    def _keys(self, **kwargs) -> set[str]:
        return {f.key for f in scan_local(ScanOptions(path=self.root, **kwargs))}

    def test_scan_all_skips_dot_directories(self) -> None:
        self.assertEqual(
            self._keys(),
            {"index.html", "global.css", "assets/app.js", "assets/app.js.map"},
        )

    def test_include_and_exclude(self) -> None:
        self.assertEqual(self._keys(include_glob=("assets/**",)), {"assets/app.js", "assets/app.js.map"})
        self.assertEqual(
            self._keys(exclude_glob=("**/*.map", "index.html")),
            {"global.css", "assets/app.js"},
        )

    def test_exclude_has_priority_over_include(self) -> None:
        self.assertEqual(self._keys(include_glob="**/*.js", exclude_glob="assets/**"), set())

    def test_file_descriptor_fields(self) -> None:
        files = {f.key: f for f in scan_local(ScanOptions(path=self.root))}
        css = files["global.css"]
        self.assertEqual(css.size, len(b"body{}"))
        self.assertEqual(css.hash, hashlib.md5(b"body{}").hexdigest())
        self.assertTrue(os.path.isabs(css.path))
        self.assertTrue(css.path.endswith("global.css"))

    def test_scan_is_restartable(self) -> None:
        options = ScanOptions(path=self.root)
        self.assertEqual({f.key for f in scan_local(options)}, {f.key for f in scan_local(options)})

    def _symlink(self, target: str, rel: str) -> None:
        try:
            os.symlink(target, os.path.join(self.root, *rel.split("/")), target_is_directory=True)
        except (OSError, NotImplementedError) as exc:
            self.skipTest(f"symlinks unavailable: {exc}")

    def test_symlinked_directory_is_scanned(self) -> None:
        with tempfile.TemporaryDirectory() as shared:
            with open(os.path.join(shared, "logo.svg"), "wb") as f:
                f.write(b"<svg/>")
            self._symlink(shared, "images")

            files = {f.key: f for f in scan_local(ScanOptions(path=self.root))}
            self.assertIn("images/logo.svg", files)
            self.assertEqual(files["images/logo.svg"].hash, hashlib.md5(b"<svg/>").hexdigest())

            plan = build_sync_plan(
                files.values(),
                [RemoteObject(key="images/logo.svg", fingerprint=hashlib.md5(b"<svg/>").hexdigest())],
                SyncOptions(region="us-east-1", bucket="b", purge=True),
            )
            self.assertEqual(plan.get("images/logo.svg").action, Action.UNCHANGED)

    def test_symlink_loop_is_skipped(self) -> None:
        self._symlink(os.path.join(self.root, "assets"), "assets/again")
        self.assertEqual(
            self._keys(),
            {"index.html", "global.css", "assets/app.js", "assets/app.js.map"},
        )

    def test_root_must_be_directory(self) -> None:
        with self.assertRaises(ConfigurationError):
            list(scan_local(ScanOptions(path=os.path.join(self.root, "missing"))))

    def test_file_md5_streams_in_chunks(self) -> None:
        data = b"x" * 5000
        self._write("big.bin", data)
        path = os.path.join(self.root, "big.bin")
        self.assertEqual(file_md5(path, chunk_size=1024), hashlib.md5(data).hexdigest())

    def test_file_md5_unreadable_raises_scan_error(self) -> None:
        with self.assertRaises(ScanError) as ctx:
            file_md5(os.path.join(self.root, "nope.txt"))
        self.assertIn("path", ctx.exception.details)


if __name__ == "__main__":
    unittest.main()
