# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Shared test entities and an in-memory SQLite session."""

from collections.abc import Iterator

import pytest
from sqlalchemy import ForeignKey, String, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, relationship

from queryspec.repository import SpecificationRepository

# ---------------------------------------------------------------------------
# Test entities
# ---------------------------------------------------------------------------


class Base(DeclarativeBase):
    pass


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100))
    role: Mapped[str] = mapped_column(String(50), default="user")
    active: Mapped[bool] = mapped_column(default=True)
    age: Mapped[int | None] = mapped_column(default=None)
    email: Mapped[str | None] = mapped_column(String(255), default=None)

    posts: Mapped[list["Post"]] = relationship(back_populates="author", order_by="Post.id")


class Post(Base):
    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(String(200))
    author_id: Mapped[int] = mapped_column(ForeignKey("users.id"))

    author: Mapped["User"] = relationship(back_populates="posts")


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def engine() -> Iterator[Engine]:
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Iterator[Session]:
    with Session(engine) as session:
        yield session


@pytest.fixture
def seeded_session(session: Session) -> Session:
    """Seed the database with a known set of users and posts.

    ============  =====  ======  ====  =================  ==============
    name          role   active  age   email              posts
    ============  =====  ======  ====  =================  ==============
    Alice         admin  yes     30    alice@example.com  Hello, World
    Bob           user   yes     25                       Hello
    Charlie       admin  no      40
    Diana         user   no                               Diary
    ============  =====  ======  ====  =================  ==============
    """
    alice = User(name="Alice", role="admin", active=True, age=30, email="alice@example.com")
    bob = User(name="Bob", role="user", active=True, age=25)
    charlie = User(name="Charlie", role="admin", active=False, age=40)
    diana = User(name="Diana", role="user", active=False)
    alice.posts = [Post(title="Hello"), Post(title="World")]
    bob.posts = [Post(title="Hello")]
    diana.posts = [Post(title="Diary")]
    session.add_all([alice, bob, charlie, diana])
    session.flush()
    return session


@pytest.fixture
def user_model() -> type[User]:
    return User


@pytest.fixture
def post_model() -> type[Post]:
    return Post


@pytest.fixture
def repo(seeded_session: Session) -> SpecificationRepository[User]:
    return SpecificationRepository(User, seeded_session)
