import pytest

from learnkit.naive_bayes import BernoulliNBClassifier

TRAIN_ROWS = [[1, 0, 1], [1, 1, 0], [1, 0, 1], [1, 1, 0]]
TRAIN_CLASSES = ["red", "blue", "red", "blue"]
TEST_ROWS = [[1, 1, 0], [1, 0, 1], [0, 1, 0], [0, 0, 1]]


@pytest.fixture
def trained():
    nb = BernoulliNBClassifier()
    nb.fit(TRAIN_ROWS, TRAIN_CLASSES)
    return nb


def test_predict_one_without_fit_raises():
    nb = BernoulliNBClassifier()
    with pytest.raises(RuntimeError):
        nb.predict_one([0, 1])


def test_prior_counts(trained):
    assert trained.class_instances["blue"] == 2
    assert trained.class_instances["red"] == 2
    assert trained.training_instances == 4


def test_red_conditional_probabilities(trained):
    assert trained.cond_prob["red"] == pytest.approx([1.0, 1.0 / 3.0, 1.0])


def test_blue_conditional_probabilities(trained):
    assert trained.cond_prob["blue"] == pytest.approx([1.0, 1.0, 1.0 / 3.0])


def test_wrong_dimension_raises(trained):
    with pytest.raises(ValueError):
        trained.predict_one([0, 2])


@pytest.mark.parametrize("doc", [[0, 1, 0], [1, 1, 0]])
def test_token_one_predicts_blue(trained, doc):
    assert trained.predict_one(doc) == "blue"


@pytest.mark.parametrize("doc", [[0, 0, 1], [1, 0, 1]])
def test_token_two_predicts_red(trained, doc):
    assert trained.predict_one(doc) == "red"


def test_predict_rows(trained):
    assert trained.predict(TEST_ROWS) == ["blue", "red", "blue", "red"]


def test_save_and_load_round_trip(trained, tmp_path):
    path = tmp_path / "nb.json"
    old = trained.predict(TEST_ROWS)
    trained.save(path)
    reloaded = BernoulliNBClassifier()
    reloaded.load(path)
    assert reloaded.predict(TEST_ROWS) == old
    assert reloaded.cond_prob == trained.cond_prob


def test_load_rejects_incomplete_file(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text('{"num_features": 3}', encoding="utf-8")
    with pytest.raises(ValueError):
        BernoulliNBClassifier().load(path)


def test_fit_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        BernoulliNBClassifier().fit([[1, 0]], ["a", "b"])