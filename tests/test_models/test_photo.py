"""Tests for Photo model."""

from catalog.models import Photo


def test_photo_tablename():
    """Photo should map to photos table."""
    assert Photo.__tablename__ == "photos"


def test_photo_has_link_columns():
    """Photo should have title and both link columns."""
    columns = {c.name for c in Photo.__table__.columns}
    assert "title" in columns
    assert "photo_link_short" in columns
    assert "photo_link_long" in columns


def test_photo_normalises_text():
    photo = Photo(title="espresso", photo_link_short=None)
    assert photo.title == "espresso"
    assert photo.photo_link_short == ""
    assert photo.photo_link_long == ""


def test_photo_str():
    photo = Photo(title="espresso", photo_link_short="s.jpg", photo_link_long="l.jpg")
    assert str(photo) == "Title: espresso\nShort link: s.jpg\nLong link: l.jpg"
