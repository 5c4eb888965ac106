"""Tests for engine-facing types and the error taxonomy."""

import numpy as np
import pytest

from vecfusion.engine import (
    AlreadyExistsError,
    DimensionMismatchError,
    FailedPreconditionError,
    FieldNotFoundError,
    InternalError,
    InvalidArgumentError,
    MetricType,
    NotFoundError,
    NotSupportedError,
    PermissionDeniedError,
    StatusCode,
    UnknownError,
    VectorEngineError,
    VectorQuery,
    check_status,
)


@pytest.mark.parametrize(
    "code,error_cls",
    [
        (1, NotFoundError),
        (2, AlreadyExistsError),
        (3, InvalidArgumentError),
        (4, NotSupportedError),
        (5, InternalError),
        (6, PermissionDeniedError),
        (7, FailedPreconditionError),
        (8, UnknownError),
        (99, UnknownError),
    ],
)
def test_check_status_raises_matching_error(code, error_cls):
    with pytest.raises(error_cls) as exc_info:
        check_status(code, "collection 'docs'")
    error = exc_info.value
    assert isinstance(error, VectorEngineError)
    assert error.message == "collection 'docs'"
    assert error.code is StatusCode.from_code(code)


def test_check_status_ok():
    assert check_status(StatusCode.OK) is None
    assert check_status(0, "ignored") is None


def test_status_code_from_code():
    assert StatusCode.from_code(3) is StatusCode.INVALID_ARGUMENT
    assert StatusCode.from_code(-1) is StatusCode.UNKNOWN
    assert StatusCode.from_code(1234) is StatusCode.UNKNOWN


def test_error_messages():
    assert str(NotFoundError("doc_1")) == "Not found: doc_1"
    assert str(FieldNotFoundError("embedding")) == "Field not found: embedding"
    assert str(UnknownError()) == "Unknown error: "


def test_specific_errors_keep_their_family():
    field_error = FieldNotFoundError("embedding")
    assert isinstance(field_error, NotFoundError)
    assert field_error.code is StatusCode.NOT_FOUND

    dim_error = DimensionMismatchError(expected=128, actual=64)
    assert isinstance(dim_error, InvalidArgumentError)
    assert (dim_error.expected, dim_error.actual) == (128, 64)
    assert str(dim_error) == "Vector dimension mismatch: expected 128, got 64"


@pytest.mark.parametrize(
    "name,expected",
    [
        ("l2", MetricType.L2),
        ("IP", MetricType.IP),
        (" Cosine ", MetricType.COSINE),
        (MetricType.MIPSL2, MetricType.MIPSL2),
    ],
)
def test_metric_type_parse(name, expected):
    assert MetricType.parse(name) is expected


def test_metric_type_parse_unknown():
    with pytest.raises(InvalidArgumentError):
        MetricType.parse("hamming-ish")


def test_vector_query_coerces_vector():
    query = VectorQuery("embedding", [0.1, 0.2, 0.3], topk=5)
    assert query.vector.dtype == np.float32
    query.validate()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"field_name": "", "vector": [0.1]},
        {"field_name": "embedding", "vector": [0.1], "topk": 0},
        {"field_name": "embedding", "vector": []},
        {"field_name": "embedding", "vector": [[0.1, 0.2], [0.3, 0.4]]},
    ],
)
def test_vector_query_validation(kwargs):
    with pytest.raises(InvalidArgumentError):
        VectorQuery(**kwargs).validate()
