"""Factory Boy setup for building domain dataclasses in tests."""

from __future__ import annotations

import factory
from faker import Faker

faker = Faker()
Faker.seed(1337)


class DataclassFactory(factory.Factory):
    """Base factory for frozen domain dataclasses (no persistence)."""

    class Meta:
        abstract = True
