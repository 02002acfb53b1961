"""Entry line rendering tests.

Covers permission strings, long-format field order, inode prefixes and
directory name highlighting.
"""

from __future__ import annotations

import io
import time
import unittest

from dirlist.entry_model import Entry, EntryKind, ListingOptions, MetadataSnapshot
from dirlist.render import format_entry, format_mtime, permission_string, write_entry
from dirlist.ui_theme import BOLD_THEME, DEFAULT_THEME, PLAIN_THEME

MTIME = 1_700_000_000.0


def _entry(
    name: bytes = b"a.txt",
    *,
    kind: EntryKind = EntryKind.REGULAR,
    mode: int = 0o644,
    nlink: int = 1,
    size: int = 42,
    inode: int = 1234,
) -> Entry:
    return Entry(
        name=name,
        metadata=MetadataSnapshot(
            kind=kind,
            mode=mode,
            nlink=nlink,
            uid=1000,
            gid=100,
            size=size,
            mtime=MTIME,
            inode=inode,
        ),
    )


def _names() -> dict[str, object]:
    return {
        "user_name": lambda uid: "alice" if uid == 1000 else str(uid),
        "group_name": lambda gid: "users" if gid == 100 else str(gid),
    }


class PermissionStringTests(unittest.TestCase):
    def test_regular_file_rw_r_r(self) -> None:
        self.assertEqual(permission_string(_entry(mode=0o644).metadata), "-rw-r--r--")

    def test_directory_prefix_and_execute_bits(self) -> None:
        entry = _entry(b"sub", kind=EntryKind.DIRECTORY, mode=0o755)
        self.assertEqual(permission_string(entry.metadata), "drwxr-xr-x")

    def test_each_bit_maps_to_its_own_column(self) -> None:
        self.assertEqual(permission_string(_entry(mode=0o000).metadata), "----------")
        self.assertEqual(permission_string(_entry(mode=0o777).metadata), "-rwxrwxrwx")
        self.assertEqual(permission_string(_entry(mode=0o421).metadata), "-r---w---x")

    def test_other_kinds_render_dash(self) -> None:
        self.assertEqual(permission_string(_entry(kind=EntryKind.OTHER, mode=0o600).metadata), "-rw-------")


class FormatEntryTests(unittest.TestCase):
    def test_default_line_is_space_then_name(self) -> None:
        self.assertEqual(format_entry(_entry(), ListingOptions()), " a.txt\n")

    def test_directory_name_is_wrapped_in_theme_style(self) -> None:
        entry = _entry(b"sub", kind=EntryKind.DIRECTORY, mode=0o755)
        self.assertEqual(format_entry(entry, ListingOptions()), " \033[34msub\033[0m\n")
        self.assertEqual(format_entry(entry, ListingOptions(), theme=BOLD_THEME), " \033[1;34msub\033[0m\n")

    def test_plain_theme_leaves_directory_unstyled(self) -> None:
        entry = _entry(b"sub", kind=EntryKind.DIRECTORY, mode=0o755)
        self.assertEqual(format_entry(entry, ListingOptions(), theme=PLAIN_THEME), " sub\n")

    def test_inode_is_printed_first(self) -> None:
        line = format_entry(_entry(inode=987), ListingOptions(show_inode=True))
        self.assertEqual(line, "987  a.txt\n")

    def test_long_format_field_order(self) -> None:
        line = format_entry(_entry(), ListingOptions(long_format=True), **_names())
        expected_time = time.strftime("%b %d %H:%M", time.localtime(MTIME))
        self.assertEqual(line, f"-rw-r--r-- 1 alice users      42 {expected_time} a.txt\n")

    def test_long_format_size_is_right_justified_to_width_seven(self) -> None:
        line = format_entry(_entry(size=42), ListingOptions(long_format=True), **_names())
        self.assertIn(" users      42 ", line)

        wide = format_entry(_entry(size=123456789), ListingOptions(long_format=True), **_names())
        self.assertIn(" users 123456789 ", wide)

    def test_long_format_with_inode_prefix(self) -> None:
        entry = _entry(b"sub", kind=EntryKind.DIRECTORY, mode=0o755, nlink=3, size=4096, inode=55)
        line = format_entry(entry, ListingOptions(long_format=True, show_inode=True), theme=DEFAULT_THEME, **_names())
        self.assertTrue(line.startswith("55 drwxr-xr-x 3 alice users    4096 "))
        self.assertTrue(line.endswith(" \033[34msub\033[0m\n"))

    def test_unresolvable_ids_fall_back_to_numbers(self) -> None:
        line = format_entry(
            _entry(),
            ListingOptions(long_format=True),
            user_name=str,
            group_name=str,
        )
        self.assertTrue(line.startswith("-rw-r--r-- 1 1000 100      42 "))

    def test_write_entry_writes_rendered_line(self) -> None:
        out = io.StringIO()
        write_entry(_entry(b"b.txt"), ListingOptions(), out)
        self.assertEqual(out.getvalue(), " b.txt\n")


class FormatMtimeTests(unittest.TestCase):
    def test_uses_abbreviated_month_day_and_clock(self) -> None:
        rendered = format_mtime(MTIME)
        self.assertEqual(rendered, time.strftime("%b %d %H:%M", time.localtime(MTIME)))
        self.assertRegex(rendered, r"^\S{3} \d{2} \d{2}:\d{2}$")


if __name__ == "__main__":
    unittest.main()
