# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .password_hashing import WerkzeugPasswordHasher
from .tokens import (
    ExpiredTokenError,
    InvalidSignatureError,
    IssuedToken,
    JwtTokenIssuer,
    MalformedTokenError,
    TokenClaim,
    TokenError,
    TokenIssuer,
)

__all__ = [
    "ExpiredTokenError",
    "InvalidSignatureError",
    "IssuedToken",
    "JwtTokenIssuer",
    "MalformedTokenError",
    "TokenClaim",
    "TokenError",
    "TokenIssuer",
    "WerkzeugPasswordHasher",
]
