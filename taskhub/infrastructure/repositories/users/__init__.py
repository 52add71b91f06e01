# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .sqlalchemy_user_repository import SqlAlchemyUserRepository, to_domain_user

__all__ = ["SqlAlchemyUserRepository", "to_domain_user"]
