"""Shared pytest fixtures for sqlbrace unit and integration tests."""
from __future__ import annotations

import pytest

from sqlbrace.compile.builder import QueryBuilder
from sqlbrace.schema.profile import BuildProfile


@pytest.fixture(scope="session")
def default_profile() -> BuildProfile:
    """MySQL quoting, no inner escaping, space padding on."""
    return BuildProfile()


@pytest.fixture(scope="session")
def strict_profile() -> BuildProfile:
    return BuildProfile.builder("mysql").strict_escaping().build()


@pytest.fixture(scope="session")
def builder(default_profile: BuildProfile) -> QueryBuilder:
    return QueryBuilder(default_profile)


@pytest.fixture(scope="session")
def strict_builder(strict_profile: BuildProfile) -> QueryBuilder:
    return QueryBuilder(strict_profile)


@pytest.fixture(scope="session")
def pg_builder() -> QueryBuilder:
    return QueryBuilder(BuildProfile.builder("postgres").build())


@pytest.fixture(scope="session")
def sqlite_builder() -> QueryBuilder:
    return QueryBuilder(BuildProfile.builder("sqlite").strict_escaping().build())
