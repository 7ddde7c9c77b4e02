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

from pathlib import Path
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict

from numcodec.utils.yaml import model_from_extended_yaml

FloatFormat = Literal['repr', 'hex']


class CodecSettings(BaseModel):
    model_config = ConfigDict(extra='forbid', frozen=True)

    # Reject varints with more continuation bytes or payload bits than their width allows. When disabled there's no
    # cap on the number of bytes read and groups past the width wrap around to the low bits.
    STRICT_VARINTS: bool = True

    # How decoded floats are printed: 'repr' is the shortest round-tripping decimal, 'hex' is float.hex() and shows
    # every bit of the mantissa.
    FLOAT_FORMAT: FloatFormat = 'repr'

    # Separator between bytes when printing encoded data as hex.
    HEX_SEPARATOR: str = ''

    @classmethod
    def from_yaml(cls, *, filepath: Union[Path, str]) -> 'CodecSettings':
        """Takes a filepath to a yaml file and returns a validated CodecSettings instance."""
        return model_from_extended_yaml(cls, filepath=filepath, custom_root=Path(__file__).parent)
