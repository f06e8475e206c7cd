# Copyright 2026 dbuscore Contributors
# SPDX-License-Identifier: Apache-2.0

"""XML codec for introspection documents."""

from dbuscore.introspection.decoder import decode_introspection
from dbuscore.introspection.encoder import DOCTYPE, encode_introspection

__all__ = [
    "decode_introspection",
    "encode_introspection",
    "DOCTYPE",
]
