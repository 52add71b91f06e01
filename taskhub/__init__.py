# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Account service: sign-up, sign-in with bearer tokens, and owner-scoped tasks."""

__version__ = "0.1.0"
