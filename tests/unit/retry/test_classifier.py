r"""Unit tests for outcome classifiers."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from aretry.predicates import always_retry, never_retry, retry_if_result_is_none
from aretry.retry import BaseOutcomeClassifier, Outcome, ResultClassifier, VoidClassifier

######################################
#     Tests for ResultClassifier     #
######################################


def test_result_classifier_handled_error() -> None:
    classifier = ResultClassifier(always_retry, ())
    assert classifier.classify(Outcome.failure(TimeoutError())) == (True, "TimeoutError")


def test_result_classifier_unhandled_error() -> None:
    classifier = ResultClassifier(never_retry, ())
    assert classifier.classify(Outcome.failure(KeyError("x"))) == (
        False,
        "KeyError not handled",
    )


def test_result_classifier_should_handle_receives_error() -> None:
    should_handle = Mock(return_value=True)
    error = ValueError("bad")
    ResultClassifier(should_handle, ()).classify(Outcome.failure(error))
    should_handle.assert_called_once_with(error)


def test_result_classifier_rejected_value() -> None:
    classifier = ResultClassifier(always_retry, (retry_if_result_is_none,))
    assert classifier.classify(Outcome.success(None)) == (True, "success predicate")


def test_result_classifier_accepted_value() -> None:
    classifier = ResultClassifier(always_retry, (retry_if_result_is_none,))
    assert classifier.classify(Outcome.success(0)) == (False, "accepted")


def test_result_classifier_empty_predicates_accept_everything() -> None:
    classifier = ResultClassifier(always_retry, ())
    assert classifier.classify(Outcome.success(None)) == (False, "accepted")


def test_result_classifier_success_ignores_should_handle() -> None:
    """Test should_handle is only consulted for failures."""
    should_handle = Mock(return_value=False)
    classifier = ResultClassifier(should_handle, (always_retry,))
    assert classifier.classify(Outcome.success("x")) == (True, "success predicate")
    should_handle.assert_not_called()


def test_result_classifier_predicates_short_circuit() -> None:
    """Test evaluation stops at the first predicate asking for a retry."""
    first = Mock(return_value=False)
    second = Mock(return_value=True)
    third = Mock(return_value=True)
    classifier = ResultClassifier(always_retry, [first, second, third])

    assert classifier.classify(Outcome.success(5)) == (True, "success predicate")
    first.assert_called_once_with(5)
    second.assert_called_once_with(5)
    third.assert_not_called()


def test_result_classifier_failure_skips_predicates() -> None:
    predicate = Mock(return_value=True)
    ResultClassifier(always_retry, (predicate,)).classify(Outcome.failure(OSError()))
    predicate.assert_not_called()


####################################
#     Tests for VoidClassifier     #
####################################


def test_void_classifier_success_is_final() -> None:
    assert VoidClassifier(always_retry).classify(Outcome.success("ignored")) == (
        False,
        "success",
    )


@pytest.mark.parametrize(
    ("should_handle", "expected"),
    [(always_retry, (True, "OSError")), (never_retry, (False, "OSError not handled"))],
)
def test_void_classifier_errors(should_handle: Mock, expected: tuple[bool, str]) -> None:
    assert VoidClassifier(should_handle).classify(Outcome.failure(OSError())) == expected


def test_base_outcome_classifier_is_abstract() -> None:
    with pytest.raises(TypeError):
        BaseOutcomeClassifier(always_retry)  # type: ignore[abstract]
