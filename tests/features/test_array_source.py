#!filepath: tests/features/test_array_source.py
from __future__ import annotations

import numpy as np
import pytest

from gaussclf.features.array_source import ArrayFeatureSource
from gaussclf.utils.errors import DimensionMismatchError


def test_contract(blobs, blob_source):
    assert blob_source.dimension() == 2
    assert blob_source.label_count() == 3
    assert blob_source.sample_count(2) == 60

    out = np.empty(2)
    blob_source.fetch(1, 4, out)
    np.testing.assert_array_equal(out, blobs[1][4])


def test_fetch_out_of_range(blob_source):
    out = np.empty(2)
    with pytest.raises(IndexError):
        blob_source.fetch(3, 0, out)
    with pytest.raises(IndexError):
        blob_source.fetch(0, 60, out)
    with pytest.raises(IndexError):
        blob_source.sample_count(-1)


def test_one_dim_blocks():
    source = ArrayFeatureSource([[1.0, 2.0, 3.0]])
    assert source.dimension() == 1
    assert source.sample_count(0) == 3


def test_mixed_dimensions_rejected():
    with pytest.raises(DimensionMismatchError):
        ArrayFeatureSource([np.zeros((3, 2)), np.zeros((3, 3))])


def test_dim_required_without_labels():
    with pytest.raises(ValueError):
        ArrayFeatureSource([])


def test_from_arrays_groups_by_label():
    X = np.array([[0.0], [1.0], [2.0], [3.0], [4.0]])
    y = np.array([1, 0, 1, 0, 1])

    source = ArrayFeatureSource.from_arrays(X, y)
    assert source.label_count() == 2
    assert source.sample_count(0) == 2
    assert source.sample_count(1) == 3

    out = np.empty(1)
    source.fetch(1, 2, out)
    assert out[0] == 4.0


def test_from_arrays_keeps_missing_label_empty():
    X = np.zeros((2, 2))
    source = ArrayFeatureSource.from_arrays(X, [0, 2], label_count=4)

    assert [source.sample_count(l) for l in range(4)] == [1, 0, 1, 0]


def test_from_arrays_validation():
    with pytest.raises(ValueError):
        ArrayFeatureSource.from_arrays(np.zeros((3, 2)), [0, 1])
    with pytest.raises(ValueError):
        ArrayFeatureSource.from_arrays(np.zeros((2, 2)), [0, -1])
    with pytest.raises(ValueError):
        ArrayFeatureSource.from_arrays(np.zeros(3), [0, 1, 2])
