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

from copy import deepcopy
from typing import Any, TypeVar

K = TypeVar('K')


def deep_merge(base: dict[K, Any], override: dict[K, Any]) -> dict[K, Any]:
    """
    Recursively merge `override` into a copy of `base`. Nested dicts are merged key by key, any other value in
    `override` replaces the one in `base`. Neither input is modified.

    >>> base = dict(STRICT_VARINTS=True, extra=dict(a=1, b=2))
    >>> override = dict(extra=dict(b=3), FLOAT_FORMAT='hex')
    >>> deep_merge(base, override) == dict(STRICT_VARINTS=True, extra=dict(a=1, b=3), FLOAT_FORMAT='hex')
    True
    >>> base == dict(STRICT_VARINTS=True, extra=dict(a=1, b=2))
    True
    """
    merged = deepcopy(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = deepcopy(value)
    return merged
