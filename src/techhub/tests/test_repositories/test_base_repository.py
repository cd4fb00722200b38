from concurrent.futures import ThreadPoolExecutor

import pytest

from techhub.exceptions.base import NotFoundError
from techhub.models.review import Review
from techhub.repositories.base_repository import BaseRepository, IdSequence
from techhub.repositories.framework_repository import FrameworkRepository
from techhub.models.framework import FrameworkInput


@pytest.fixture
def review_repo() -> BaseRepository[Review]:
    return BaseRepository[Review]("Review")


def add_review(repo: BaseRepository[Review], **fields) -> Review:
    data = {"framework_id": 1, "rating": 5, "author": "ana"}
    data.update(fields)
    with repo._lock:
        return repo._insert(lambda new_id: Review(id=new_id, **data))


class TestIdSequence:

    def test_starts_at_one_and_increments(self):
        seq = IdSequence()
        assert [seq.next_id() for _ in range(3)] == [1, 2, 3]
        assert seq.peek() == 4

    def test_custom_start(self):
        assert IdSequence(start=100).next_id() == 100

    def test_thread_safe(self):
        """
        Behavior:
          - 1000 ids drawn from 8 threads are all distinct and contiguous.
        """
        seq = IdSequence()
        with ThreadPoolExecutor(max_workers=8) as pool:
            ids = list(pool.map(lambda _: seq.next_id(), range(1000)))

        assert sorted(ids) == list(range(1, 1001))

    def test_shared_sequence_between_stores(self):
        seq = IdSequence()
        a = FrameworkRepository(sequence=seq)
        b = FrameworkRepository(sequence=seq)

        first = a.create(FrameworkInput(name="Ktor", current_version="2.3.0"))
        second = b.create(FrameworkInput(name="Ktor", current_version="2.3.0"))

        assert (first.id, second.id) == (1, 2)


class TestBaseRepository:
    """
    The generic store primitives, exercised with Review records.
    """

    def test_insert_and_get(self, review_repo):
        review = add_review(review_repo, comment="Great docs")

        assert review.id == 1
        assert review_repo.get_by_id(1) == review
        assert review_repo.exists(1)
        assert review_repo.count() == 1

    def test_get_missing_uses_model_name(self, review_repo):
        with pytest.raises(NotFoundError) as exc_info:
            review_repo.get_by_id(7)

        assert exc_info.value.message == "Review with ID 7 not found."
        assert exc_info.value.fields == ["id"]

    def test_find_with_predicate(self, review_repo):
        add_review(review_repo, framework_id=1, rating=5)
        add_review(review_repo, framework_id=2, rating=3)
        add_review(review_repo, framework_id=1, rating=4)

        found = review_repo.find(lambda r: r.framework_id == 1)

        assert [r.rating for r in found] == [5, 4]

    def test_failed_build_consumes_id(self, review_repo):
        """
        Behavior:
          - If building the record raises, nothing is stored and the reserved id is
            never handed out again.
        """
        def explode(_id):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            with review_repo._lock:
                review_repo._insert(explode)

        assert review_repo.count() == 0
        assert add_review(review_repo).id == 2

    def test_delete(self, review_repo):
        review = add_review(review_repo)
        review_repo.delete(review.id)

        assert not review_repo.exists(review.id)
        with pytest.raises(NotFoundError):
            review_repo.delete(review.id)

    def test_delete_logs_success(self, review_repo, caplog):
        review = add_review(review_repo)

        with caplog.at_level("INFO", logger="techhub.repositories.base_repository"):
            review_repo.delete(review.id)

        records = [r for r in caplog.records if r.getMessage() == "repo.delete.success"]
        assert records
        assert records[0].model == "Review"
        assert records[0].id == review.id
