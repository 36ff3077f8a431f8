import pytest

from webstudio.api.models import InsertReview, ReviewWithUser
from webstudio.database.daos import ReviewDao
from webstudio.database.exceptions import InvalidValueError, MissingReferenceError


@pytest.mark.repository
class TestReviewDao:
    """Test suite for ReviewDao."""

    def test_new_reviews_are_unapproved(self, db_session, sample_user):
        review = ReviewDao().createReview(
            db_session, InsertReview(user_id=sample_user.id, rating=5, comment="Excelente trabalho!")
        )
        assert review.is_approved is False
        assert review.created_at is not None

    def test_review_requires_existing_user(self, db_session):
        with pytest.raises(MissingReferenceError):
            ReviewDao().createReview(db_session, InsertReview(user_id=404, rating=4))
        db_session.rollback()

    def test_rating_range_enforced_by_database(self, db_session, sample_user):
        # bypass the pydantic bounds to reach the CHECK constraint
        review = InsertReview.model_construct(user_id=sample_user.id, rating=9, comment=None)
        with pytest.raises(InvalidValueError) as exc_info:
            ReviewDao().createReview(db_session, review)
        assert "rating_range" in exc_info.value.constraint
        db_session.rollback()

    def test_approve_is_idempotent_and_leaves_other_fields(self, db_session, sample_user):
        dao = ReviewDao()
        review = dao.createReview(
            db_session, InsertReview(user_id=sample_user.id, rating=3, comment="Bom atendimento")
        )
        created_at = review.created_at

        first = dao.approveReview(db_session, review.id)
        second = dao.approveReview(db_session, review.id)

        assert first.is_approved is True
        assert second.is_approved is True
        assert second.rating == 3
        assert second.comment == "Bom atendimento"
        assert second.user_id == sample_user.id
        assert second.created_at == created_at

    def test_approve_missing_review(self, db_session):
        assert ReviewDao().approveReview(db_session, 10) is None

    def test_approved_reviews_carry_their_author(self, db_session, sample_user, other_user):
        dao = ReviewDao()
        hidden = dao.createReview(db_session, InsertReview(user_id=other_user.id, rating=2))
        shown = dao.createReview(db_session, InsertReview(user_id=sample_user.id, rating=5))
        dao.approveReview(db_session, shown.id)

        approved = dao.getApprovedReviews(db_session)

        assert [r.id for r in approved] == [shown.id]
        assert isinstance(approved[0], ReviewWithUser)
        assert approved[0].user.display_name == "Ana Silva"
        assert hidden.id not in [r.id for r in approved]

    def test_approved_review_with_missing_author(self, loose_session):
        dao = ReviewDao()
        orphan = dao.createReview(loose_session, InsertReview(user_id=555, rating=4, comment="Sem autor"))
        dao.approveReview(loose_session, orphan.id)

        approved = dao.getApprovedReviews(loose_session)

        assert len(approved) == 1
        assert approved[0].id == orphan.id
        assert approved[0].user is None

    def test_reviews_by_user_and_all(self, db_session, sample_user, other_user):
        dao = ReviewDao()
        a = dao.createReview(db_session, InsertReview(user_id=sample_user.id, rating=4))
        b = dao.createReview(db_session, InsertReview(user_id=other_user.id, rating=5))
        c = dao.createReview(db_session, InsertReview(user_id=sample_user.id, rating=1))

        assert [r.id for r in dao.getReviewsByUser(db_session, sample_user.id)] == [c.id, a.id]
        assert [r.id for r in dao.getAllReviews(db_session)] == [c.id, b.id, a.id]

    def test_delete_review(self, db_session, sample_user):
        dao = ReviewDao()
        review = dao.createReview(db_session, InsertReview(user_id=sample_user.id, rating=4))

        assert dao.deleteReview(db_session, review.id + 100) is False
        assert dao.deleteReview(db_session, review.id) is True
        assert dao.getReview(db_session, review.id) is None
