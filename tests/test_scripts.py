"""
runeset test suite
command-line tests
"""

import io
import unittest
from contextlib import redirect_stdout

import runeset
from runeset import Runeset, Glyph
from runeset.scripts.edit import main
from .base import BaseTester


class TestScripts(BaseTester):
    """Test the runeset command."""

    def run_main(self, *args):
        """Run command, return stdout."""
        output = io.StringIO()
        with redirect_stdout(output):
            main([str(_arg) for _arg in args])
        return output.getvalue()

    def test_new(self):
        path = self.temp_path / 'new.bin'
        self.run_main('new', path)
        assert path.read_bytes() == bytes(2048)

    def test_new_no_overwrite(self):
        path = self.temp_path / 'font.bin'
        path.write_bytes(b'\x01' * 2048)
        with self.assertRaises(SystemExit) as cm:
            self.run_main('new', path)
        assert cm.exception.code == 1
        assert path.read_bytes() == b'\x01' * 2048

    def test_show(self):
        path = self.temp_path / 'font.bin'
        runeset.save(Runeset.blank(), path)
        output = self.run_main('show', path)
        assert len(output.splitlines()) == 41

    def test_show_glyph(self):
        path = self.temp_path / 'font.bin'
        font = Runeset.blank()
        font.set_at(self.hollow_square, 65)
        runeset.save(font, path)
        output = self.run_main('show', path, '--index', '0x41')
        lines = output.splitlines()
        assert lines[0] == '0x41 (01, 02)'
        assert lines[-4:] == ['▛▀▀▜', '▌  ▐', '▌  ▐', '▙▄▄▟']

    def test_show_missing(self):
        with self.assertRaises(SystemExit):
            self.run_main('show', self.temp_path / 'missing.bin')

    def test_edit_creates(self):
        path = self.temp_path / 'font.bin'
        self.run_main('toggle', path, '--index', '65', '3', '2')
        font, found = runeset.load(path)
        assert found
        assert font.read_at(65) == Glyph.blank().toggle(3, 2)

    def test_edit_commands(self):
        path = self.temp_path / 'font.bin'
        font = Runeset.blank()
        font.set_at(self.diagonal, 1)
        runeset.save(font, path)
        self.run_main('mirror', path, '--index', '1')
        self.run_main('copy', path, '--index', '1', '--to', '2')
        self.run_main('invert', path, '--index', '3')
        self.run_main('clear', path, '--index', '1')
        font, _ = runeset.load(path)
        assert font.read_at(1).is_blank()
        assert font.read_at(2) == self.diagonal.reverse()
        assert font.read_at(3) == self.full

    def test_edit_corrupt_untouched(self):
        path = self.temp_path / 'corrupt.bin'
        path.write_bytes(bytes(100))
        with self.assertRaises(SystemExit):
            self.run_main('invert', path, '--index', '0')
        assert path.read_bytes() == bytes(100)

    def test_edit_bad_index(self):
        path = self.temp_path / 'font.bin'
        runeset.save(self.patterned_runeset(), path)
        with self.assertRaises(SystemExit):
            self.run_main('invert', path, '--index', '256')
        font, _ = runeset.load(path)
        assert font == self.patterned_runeset()

    def test_edit_absent_bad_index(self):
        path = self.temp_path / 'absent.bin'
        with self.assertRaises(SystemExit):
            self.run_main('invert', path, '--index', '256')
        assert not path.exists()

    def test_import_export(self):
        image = self.create_image('font.png', [(3, 2)])
        path = self.temp_path / 'font.bin'
        self.run_main('import', image, path)
        font, _ = runeset.load(path)
        assert font.read_at(0).rows == (0, 0, 0x08, 0, 0, 0, 0, 0)
        exported = self.temp_path / 'export.png'
        self.run_main('export', path, exported)
        assert runeset.import_image(exported) == font


if __name__ == '__main__':
    unittest.main()
