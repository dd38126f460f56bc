"""Shared pytest fixtures for twclass tests."""

import pytest


# a real-world toggle switch, in the order it was written
TOGGLE_CLASSES = [
    'w-11',
    'h-6',
    'bg-gray-200',
    'peer-focus:outline-none',
    'peer-focus:ring-4',
    'peer-focus:ring-blue-300',
    'dark:peer-focus:ring-blue-800',
    'rounded-full',
    'peer',
    'dark:bg-gray-700',
    'peer-checked:after:translate-x-full',
    'peer-checked:after:border-white',
    "after:content-['']",
    'after:absolute',
    'after:top-[2px]',
    'after:left-[2px]',
    'after:bg-white',
    'after:border-gray-300',
    'after:border',
    'after:rounded-full',
    'after:h-5',
    'after:w-5',
    'after:transition-all',
    'dark:border-gray-600',
    'peer-checked:bg-blue-600',
]

TOGGLE_SORTED = [
    'bg-gray-200',
    'after:bg-white',
    'dark:bg-gray-700',
    'h-6',
    'after:h-5',
    'peer',
    'dark:peer-focus:ring-blue-800',
    'peer-checked:after:border-white',
    'peer-checked:after:translate-x-full',
    'peer-checked:bg-blue-600',
    'peer-focus:outline-none',
    'peer-focus:ring-4',
    'peer-focus:ring-blue-300',
    'rounded-full',
    'after:rounded-full',
    'w-11',
    'after:w-5',
    'after:absolute',
    'after:border',
    'after:border-gray-300',
    "after:content-['']",
    'after:left-[2px]',
    'after:top-[2px]',
    'after:transition-all',
    'dark:border-gray-600',
]


@pytest.fixture
def toggle_classes() -> list:
    return list(TOGGLE_CLASSES)


@pytest.fixture
def toggle_sorted() -> list:
    return list(TOGGLE_SORTED)


@pytest.fixture
def clean_env(monkeypatch):
    """Environment without any TWCLASS_* settings."""
    monkeypatch.delenv('TWCLASS_MAX_LEN', raising=False)
    monkeypatch.delenv('TWCLASS_QUOTES_ON_NEW_LINE', raising=False)
    return monkeypatch
