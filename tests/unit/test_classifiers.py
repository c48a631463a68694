import numpy as np
import pytest

from infrastructure.classifiers import (
    Classifier,
    EstimatorClassifier,
    MajorityClassifier,
    get_classifier_class,
    make_classifier_factory,
    register_classifier,
)


def test_factory_resolves_builtin_classifiers() -> None:
    assert make_classifier_factory("majority") is MajorityClassifier
    assert make_classifier_factory(" Estimator ") is EstimatorClassifier


def test_factory_unknown_name_raises() -> None:
    with pytest.raises(RuntimeError, match="No classifier module found"):
        make_classifier_factory("does_not_exist")


def test_register_classifier_rejects_duplicates_without_override() -> None:
    class Constant(Classifier):
        def train(self, features, labels) -> None:
            pass

        def predict(self, features):
            return [self.options.get("label")] * len(features)

    register_classifier("constant_test", Constant)
    with pytest.raises(RuntimeError, match="already registered"):
        register_classifier("constant_test", Constant)

    register_classifier("constant_test", Constant, override=True)
    assert get_classifier_class("constant_test") is Constant
    assert make_classifier_factory("constant_test")({"label": "z"}).predict([1, 2]) == ["z", "z"]


def test_majority_classifier_tie_goes_to_first_seen() -> None:
    clf = MajorityClassifier()
    clf.train([[0]] * 4, ["b", "a", "a", "b"])
    assert clf.predict([[1], [2]]) == ["b", "b"]


def test_majority_classifier_requires_training() -> None:
    with pytest.raises(RuntimeError, match="trained"):
        MajorityClassifier().predict([[1]])
    with pytest.raises(ValueError, match="empty training set"):
        MajorityClassifier().train([], [])


def test_estimator_classifier_wraps_sklearn() -> None:
    clf = EstimatorClassifier(
        {"estimator": "sklearn.neighbors.KNeighborsClassifier", "params": {"n_neighbors": 1}}
    )
    clf.train([[0.0], [0.2], [5.0], [5.2]], ["lo", "lo", "hi", "hi"])

    assert clf.predict([[0.1], [4.9]]) == ["lo", "hi"]
    assert clf.predict(np.empty((0, 1))) == []


def test_estimator_classifier_default_estimator() -> None:
    clf = EstimatorClassifier({"params": {"n_neighbors": 1}})
    assert type(clf.estimator).__name__ == "KNeighborsClassifier"


@pytest.mark.parametrize(
    ("path", "message"),
    [
        ("KNeighborsClassifier", "dotted path"),
        ("sklearn.neighbors.NoSuchEstimator", "no estimator"),
        ("sklearn.linear_model.LinearRegression", "not a scikit-learn classifier"),
    ],
)
def test_estimator_classifier_rejects_bad_estimators(path: str, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        EstimatorClassifier({"estimator": path})
