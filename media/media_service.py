from io import BytesIO
from typing import Callable, Dict, List

from common.errors import NotFoundError
from common.utils.logging_service import logger
from common.utils.pdf_export import get_pdf_readable_stream
from common.utils.utils import new_id, utc_now
from media.media_store import MediaStore
from schema.media_schema import MediaSchema, load_body, require_object

# (media id, file bytes, original filename) -> public URL
PosterStorage = Callable[[str, bytes, str], str]

# reviews change only through the review operations
PROTECTED_FIELDS = ("id", "createdAt", "reviews")

media_schema = MediaSchema()


def find_media(media_list: List[Dict], media_id: str) -> Dict:
    for media in media_list:
        if media.get("id") == media_id:
            return media

    logger.warning(f"media {media_id} does not exist")
    raise NotFoundError(f"media {media_id} not found")


def list_all(store: MediaStore) -> List[Dict]:
    return store.load()


def search(store: MediaStore, query: str) -> List[Dict]:
    needle = query.lower()
    return [
        media
        for media in store.load()
        if media.get("Title") is not None and needle in str(media["Title"]).lower()
    ]


def get_by_id(store: MediaStore, media_id: str) -> Dict:
    return find_media(store.load(), media_id)


def create(store: MediaStore, body) -> Dict:
    payload = load_body(media_schema, body)

    with store.transaction() as media_list:
        new_media = {
            **payload,
            "id": new_id(m.get("id") for m in media_list),
            "createdAt": utc_now(),
        }
        media_list.append(new_media)

    logger.info(f"Created media {new_media['id']} ({new_media['Title']})")
    return new_media


def update(store: MediaStore, media_id: str, body) -> Dict:
    """
    Shallow-merges the body over the stored record. ``id``, ``createdAt`` and
    ``reviews`` are never overwritten.
    """
    changes = {
        k: v for k, v in require_object(body).items() if k not in PROTECTED_FIELDS
    }

    with store.transaction() as media_list:
        index = media_list.index(find_media(media_list, media_id))
        updated_media = {**media_list[index], **changes}
        media_list[index] = updated_media

    logger.info(f"Updated media {media_id}: {sorted(changes)}")
    return updated_media


def delete(store: MediaStore, media_id: str) -> None:
    with store.transaction() as media_list:
        target = find_media(media_list, media_id)
        media_list[:] = [m for m in media_list if m is not target]

    logger.info(f"Deleted media {media_id}")


def attach_poster(
    store: MediaStore,
    media_id: str,
    data: bytes,
    filename: str,
    storage: PosterStorage,
) -> Dict:
    """
    Stores a poster through the given storage adapter and records the URL it
    returns as the media's ``Poster``.
    """
    find_media(store.load(), media_id)

    # upload outside the lock; the record is looked up again before merging
    url = storage(media_id, data, filename)

    with store.transaction() as media_list:
        index = media_list.index(find_media(media_list, media_id))
        updated_media = {**media_list[index], "Poster": url}
        media_list[index] = updated_media

    logger.info(f"Poster for media {media_id} set to {url}")
    return updated_media


def export_pdf(store: MediaStore, media_id: str) -> BytesIO:
    media = get_by_id(store, media_id)
    return get_pdf_readable_stream(media)
