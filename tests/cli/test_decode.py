import os
import tempfile
import unittest
from contextlib import redirect_stdout
from io import StringIO
from unittest.mock import patch

from structlog.testing import capture_logs

from numcodec.cli.decode import create_parser, execute, format_value
from numcodec.conf.settings import CodecSettings


class DecodeTest(unittest.TestCase):
    def setUp(self):
        super().setUp()
        self.parser = create_parser()

    def _execute(self, argv: list[str]) -> tuple[int, list[str], list[dict]]:
        args = self.parser.parse_args(argv)
        f = StringIO()
        with capture_logs() as logs:
            with redirect_stdout(f):
                code = execute(args)
        # Transforming prints str in array
        return code, f.getvalue().splitlines(), logs

    def test_decode_hex(self):
        code, output, _ = self._execute(['--kind', 'vuint32', '--hex', '007f8001ac02'])
        self.assertEqual(code, 0)
        self.assertEqual(output, ['0', '127', '128', '300'])

    def test_decode_hex_with_separators(self):
        code, output, _ = self._execute(['--kind', 'vsint32', '--hex', '0x01:02 ac02'])
        self.assertEqual(code, 0)
        self.assertEqual(output, ['-1', '1', '150'])

    def test_decode_floats(self):
        code, output, _ = self._execute(['--kind', 'float', '--hex', '0000803f'])
        self.assertEqual(output, ['1.0'])

        code, output, _ = self._execute(['--kind', 'double', '--hex', '000000000000f03f'])
        self.assertEqual(code, 0)
        self.assertEqual(output, ['1.0'])

    def test_float_format_hex(self):
        settings = CodecSettings(FLOAT_FORMAT='hex')
        with patch('numcodec.conf.get_settings.get_settings', return_value=settings):
            code, output, _ = self._execute(['--kind', 'float', '--hex', 'cdcccc3d'])
        self.assertEqual(code, 0)
        self.assertEqual(output, ['0x1.99999a0000000p-4'])

    def test_format_value(self):
        self.assertEqual(format_value(300, 'hex'), '300')
        self.assertEqual(format_value(0.5, 'hex'), '0x1.0000000000000p-1')
        self.assertEqual(format_value(0.5, 'repr'), '0.5')

    def test_truncated_input(self):
        code, output, logs = self._execute(['--kind', 'vuint32', '--hex', 'ac02ac'])
        self.assertEqual(code, 1)
        # values before the truncated one were already printed
        self.assertEqual(output, ['300'])
        self.assertEqual(logs[-1]['event'], 'decoding failed')
        self.assertEqual(logs[-1]['decoded'], 1)

    def test_strict(self):
        code, output, logs = self._execute(['--kind', 'vuint32', '--hex', 'ffffffff1f'])
        self.assertEqual(code, 1)
        self.assertEqual(output, [])
        self.assertIn('does not fit in 32 bits', logs[-1]['error'])

        code, output, _ = self._execute(['--kind', 'vuint32', '--no-strict', '--hex', 'ffffffff1f'])
        self.assertEqual(code, 0)
        self.assertEqual(output, ['4294967295'])

        code, output, _ = self._execute(['--kind', 'vuint32', '--no-strict', '--hex', '808080808001'])
        self.assertEqual(code, 0)
        self.assertEqual(output, ['8'])

    def test_strict_from_settings(self):
        settings = CodecSettings(STRICT_VARINTS=False)
        with patch('numcodec.conf.get_settings.get_settings', return_value=settings):
            code, output, _ = self._execute(['--kind', 'vuint32', '--hex', '808080808000'])
        self.assertEqual(code, 0)
        self.assertEqual(output, ['0'])

    def test_invalid_hex(self):
        code, output, logs = self._execute(['--kind', 'vuint32', '--hex', 'zz'])
        self.assertEqual(code, 1)
        self.assertEqual(logs[-1]['event'], 'invalid hex input')

    def test_decode_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, 'values.bin')
            with open(path, 'wb') as fp:
                fp.write(bytes.fromhex('0000803f00000000000000c0'))
            code, output, _ = self._execute(['--kind', 'float', '--file', path])
        self.assertEqual(code, 0)
        self.assertEqual(output, ['1.0', '0.0', '-2.0'])

    def test_missing_file(self):
        code, output, logs = self._execute(['--kind', 'double', '--file', '/nonexistent/values.bin'])
        self.assertEqual(code, 1)
        self.assertEqual(logs[-1]['event'], 'file not found')

    def test_hex_and_file_are_exclusive(self):
        f = StringIO()
        with redirect_stdout(f), self.assertRaises(SystemExit):
            self.parser.parse_args(['--kind', 'double', '--hex', '00', '--file', 'x'])


if __name__ == '__main__':
    unittest.main()
