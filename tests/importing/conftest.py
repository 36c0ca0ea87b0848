"""Shared fixtures for the file import tests."""

import pytest
from importing.config import ImportSettings
from importing.flow import FileImportFlow
from ordering.catalogue.product import Product
from ordering.domain import ordering


def product_from_line(line):
    """Map ``name;price`` to a Product."""
    name, price = line.split(";")
    return Product(name=name.strip(), price=float(price))


@pytest.fixture()
def source_dir(tmp_path):
    return tmp_path / "in"


@pytest.fixture()
def dest_dir(tmp_path):
    return tmp_path / "done"


@pytest.fixture()
def make_flow(source_dir, dest_dir):
    def _make(move=True, **overrides):
        settings = ImportSettings(source_dir=source_dir, dest_dir=dest_dir if move else None, **overrides)
        return FileImportFlow(ordering, settings, product_from_line)

    return _make


@pytest.fixture()
def write_file(source_dir):
    def _write(name, text):
        source_dir.mkdir(parents=True, exist_ok=True)
        path = source_dir / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
