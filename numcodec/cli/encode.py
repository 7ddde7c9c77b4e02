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

from argparse import ArgumentParser, Namespace

from structlog import get_logger

from numcodec.codec import NumericKind, encode_to_bytes

logger = get_logger()


def create_parser() -> ArgumentParser:
    from numcodec.cli.util import create_parser
    parser = create_parser()
    parser.add_argument('--kind', required=True, choices=[kind.value for kind in NumericKind],
                        help='Kind of value to encode')
    parser.add_argument('values', nargs='+',
                        help='Values to encode, ints accept 0x/0o/0b prefixes and floats accept float.hex() form')
    return parser


def execute(args: Namespace) -> int:
    from numcodec.cli.util import format_hex
    from numcodec.conf.get_settings import get_settings

    settings = get_settings()
    kind = NumericKind(args.kind)
    log = logger.new(kind=kind.value)

    for text in args.values:
        try:
            value = kind.parse(text)
            data = encode_to_bytes(kind, value)
        except (TypeError, ValueError) as e:
            log.error('cannot encode value', value=text, error=str(e))
            return 1
        log.debug('encoded value', value=value, size=len(data))
        print(format_hex(data, settings.HEX_SEPARATOR))

    return 0


def main() -> int:
    parser = create_parser()
    args = parser.parse_args()
    return execute(args)
