"""Root conftest — shared test configuration.

Invariants:
    - Every test gets freshly created tables in a throwaway SQLite file
    - get_image_host overridden with FakeImageHost (no network, no disk writes)
    - Messages default to English so assertions read naturally
"""

import io
import os
import tempfile

_TMP_DIR = tempfile.mkdtemp(prefix="freeads-test-")

os.environ.setdefault("DATABASE_URL", f"sqlite:///{_TMP_DIR}/test.db")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DEFAULT_LOCALE", "en")
os.environ.setdefault("UPLOAD_DIR", os.path.join(_TMP_DIR, "uploads"))
os.environ.setdefault("AUTO_CREATE_TABLES", "false")

import pytest
from fastapi.testclient import TestClient
from PIL import Image

import app.models  # noqa: F401
from app.config import get_settings
from app.core.deps import get_image_host
from app.core.security import create_access_token
from app.db.base import Base
from app.db.session import engine, SessionLocal
from app.main import app as fastapi_app
from app.models.classified_ad import ClassifiedAd
from app.models.photo import Photo
from app.models.user import User
from app.services.image_host import ImageHost, apply_transform, DESTROY_OK


def make_image(size=(800, 600), fmt="PNG") -> bytes:
    """Encode a solid-colour image."""
    buf = io.BytesIO()
    Image.new("RGB", size, (200, 30, 30)).save(buf, fmt)
    return buf.getvalue()


class FakeImageHost(ImageHost):
    """ImageHost that keeps uploads in memory and records every call."""

    def __init__(self):
        super().__init__(get_settings())
        self.uploads = []
        self.destroyed = []
        self.destroy_result = DESTROY_OK
        self.upload_error = None
        self._counter = 0

    async def upload(self, stream, filename, transform, folder=None):
        if self.upload_error:
            raise self.upload_error
        content, ext = apply_transform(stream.read(), transform)
        self._counter += 1
        public_id = f"classified-ads/fake{self._counter}.{ext}"
        self.uploads.append({"filename": filename, "public_id": public_id, "content": content})
        return {
            "url": f"https://img.test/{public_id}",
            "public_id": public_id,
            "size": len(content),
        }

    async def destroy(self, public_id):
        self.destroyed.append(public_id)
        return {"result": self.destroy_result}


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    yield session
    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def image_host():
    return FakeImageHost()


@pytest.fixture
def client(db, image_host):
    """FastAPI test client with the image host overridden."""
    fastapi_app.dependency_overrides[get_image_host] = lambda: image_host
    yield TestClient(fastapi_app)
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def owner(db):
    user = User(username="marko", known_as="Marko", city="Skopje", country="Macedonia")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def other_user(db):
    user = User(username="ana", known_as="Ana", city="Bitola")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def ad(db, owner):
    classified_ad = ClassifiedAd(user_id=owner.id, title="Bicycle", description="Mountain bike", price=120, city="Skopje")
    db.add(classified_ad)
    db.commit()
    db.refresh(classified_ad)
    return classified_ad


@pytest.fixture
def auth_headers(owner):
    token = create_access_token({"sub": str(owner.id)})
    return {"Authorization": f"Bearer {token}"}


def add_stored_photo(db, ad, is_main=False, public_id="classified-ads/seed.jpg"):
    """Insert a photo row directly, bypassing the API."""
    photo = Photo(
        classified_ad_id=ad.id,
        url=f"https://img.test/{public_id}" if public_id else "https://example.com/legacy.jpg",
        public_id=public_id,
        is_main=is_main,
    )
    db.add(photo)
    db.commit()
    db.refresh(photo)
    return photo


@pytest.fixture
def stored_photo(db, ad):
    """Factory inserting photos on the `ad` fixture."""
    def _make(**kwargs):
        return add_stored_photo(db, ad, **kwargs)
    return _make
