from typing import Dict, List

from common.utils.logging_service import logger
from common.utils.utils import new_id
from media.media_store import MediaStore
from media.media_service import find_media
from reviews.review import Review
from schema.media_schema import ReviewRequestSchema, load_body

review_request_schema = ReviewRequestSchema()


def list_reviews(store: MediaStore, media_id: str) -> List[Dict]:
    """
    Returns the reviews embedded in a media record, oldest first.

    :raises NotFoundError: if no media record has the given id.
    """
    media = find_media(store.load(), media_id)
    return media.get("reviews") or []


def add_review(store: MediaStore, media_id: str, body) -> Dict:
    """
    Validates a {comment, rate} body and appends a new review to the record.

    :return: the updated media record.
    """
    payload = load_body(review_request_schema, body)

    with store.transaction() as media_list:
        media = find_media(media_list, media_id)
        reviews = media.setdefault("reviews", [])

        review = Review(
            _id=new_id(r.get("_id") for r in reviews),
            elementId=media_id,
            comment=payload["comment"],
            rate=payload["rate"],
        )
        reviews.append(review.to_dict())

    logger.info(f"Review {review._id} added to media {media_id}")
    return media


def delete_review(store: MediaStore, media_id: str, review_id: str) -> Dict:
    """
    Removes a review from a media record. An unknown review id leaves the
    record as it was.
    """
    with store.transaction() as media_list:
        media = find_media(media_list, media_id)
        reviews = media.get("reviews") or []
        remaining = [r for r in reviews if r.get("_id") != review_id]

        if len(remaining) == len(reviews):
            logger.warning(f"Review {review_id} not found on media {media_id}")
        else:
            logger.info(f"Review {review_id} removed from media {media_id}")

        if "reviews" in media:
            media["reviews"] = remaining

    return media
