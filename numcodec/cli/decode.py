# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import os
from argparse import ArgumentParser, Namespace
from typing import Any

from structlog import get_logger

from numcodec.codec import Number, NumericKind, decode_all
from numcodec.conf.settings import FloatFormat
from numcodec.serialization import Deserializer, SerializationError

logger = get_logger()


def create_parser() -> ArgumentParser:
    from numcodec.cli.util import create_parser
    parser = create_parser()
    parser.add_argument('--kind', required=True, choices=[kind.value for kind in NumericKind],
                        help='Kind of the encoded values')
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('--hex', help='Encoded values as a hex string, whitespace and ":" are ignored')
    source.add_argument('--file', help='Path to a binary file holding the encoded values')
    parser.add_argument('--no-strict', action='store_true',
                        help='Accept over-long varints, groups past the width wrap around to the low bits')
    return parser


def format_value(value: Number, float_format: FloatFormat) -> str:
    if isinstance(value, float) and float_format == 'hex':
        return value.hex()
    return repr(value)


def _decode_and_print(deserializer: Deserializer, kind: NumericKind, *, strict: bool, float_format: FloatFormat,
                      log: Any) -> int:
    count = 0
    try:
        for value in decode_all(deserializer, kind, strict=strict):
            print(format_value(value, float_format))
            count += 1
    except SerializationError as e:
        log.error('decoding failed', decoded=count, error=str(e))
        return 1
    log.debug('decoded values', count=count)
    return 0


def execute(args: Namespace) -> int:
    from numcodec.cli.util import parse_hex
    from numcodec.conf.get_settings import get_settings

    settings = get_settings()
    kind = NumericKind(args.kind)
    strict = settings.STRICT_VARINTS and not args.no_strict
    log = logger.new(kind=kind.value, strict=strict)

    if args.hex is not None:
        try:
            data = parse_hex(args.hex)
        except ValueError as e:
            log.error('invalid hex input', error=str(e))
            return 1
        deserializer = Deserializer.build_bytes_deserializer(data)
        return _decode_and_print(deserializer, kind, strict=strict, float_format=settings.FLOAT_FORMAT, log=log)

    if not os.path.isfile(args.file):
        log.error('file not found', path=args.file)
        return 1

    with open(args.file, 'rb') as fp:
        deserializer = Deserializer.build_stream_deserializer(fp)
        return _decode_and_print(deserializer, kind, strict=strict, float_format=settings.FLOAT_FORMAT, log=log)


def main() -> int:
    parser = create_parser()
    args = parser.parse_args()
    return execute(args)
