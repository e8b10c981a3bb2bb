import uuid

import pytest

from persona_core.storage import ContentPolicy, TrainingCategory, TrainingSubject


def test_default_limits():
    policy = ContentPolicy()
    assert policy.max_length(TrainingCategory.GENERAL) == 5000
    assert policy.max_length(TrainingCategory.TOPIC) == 50000


def test_max_length_accepts_raw_category_value():
    assert ContentPolicy().max_length("topic") == 50000


def test_unknown_category_raises():
    with pytest.raises(ValueError):
        ContentPolicy().max_length("summary")


def test_custom_limits_missing_category_raises():
    policy = ContentPolicy({TrainingCategory.GENERAL: 10})
    assert policy.max_length(TrainingCategory.GENERAL) == 10
    with pytest.raises(ValueError):
        policy.max_length(TrainingCategory.TOPIC)


def test_allows_is_inclusive_of_limit():
    policy = ContentPolicy({TrainingCategory.GENERAL: 3, TrainingCategory.TOPIC: 5})
    assert policy.allows(TrainingCategory.GENERAL, "abc") is True
    assert policy.allows(TrainingCategory.GENERAL, "abcd") is False


def test_subject_constructors():
    owner, topic = uuid.uuid4(), uuid.uuid4()
    general = TrainingSubject.general(owner)
    assert general.category == TrainingCategory.GENERAL and general.topic_id is None
    scoped = TrainingSubject.topic(owner, topic)
    assert scoped.category == TrainingCategory.TOPIC and scoped.topic_id == topic


def test_subject_rejects_inconsistent_topic():
    with pytest.raises(ValueError):
        TrainingSubject(owner_id=uuid.uuid4(), category=TrainingCategory.TOPIC)
    with pytest.raises(ValueError):
        TrainingSubject(owner_id=uuid.uuid4(), topic_id=uuid.uuid4())


def test_subject_coerces_raw_category():
    owner = uuid.uuid4()
    subject = TrainingSubject(owner_id=owner, category="general")
    assert subject.category is TrainingCategory.GENERAL
    assert subject == TrainingSubject.general(owner)
