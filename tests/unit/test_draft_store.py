"""
DraftStore unit tests.
使用 tmp_path 隔离文件系统。
"""

import json

import pytest

from app.exceptions import InputValidationError
from app.models import FormDraft, ContentKind, DRAFT_SCHEMA_VERSION
from app.services.draft_store import DraftStore


@pytest.fixture
def store(tmp_path):
    return DraftStore(base_path=str(tmp_path / "drafts"))


async def test_load_missing_returns_none(store):
    assert await store.load("张三") is None


async def test_save_then_load(store):
    draft = FormDraft(
        owner="张三",
        input_mode=ContentKind.DOCUMENT,
        price_list="套餐A: $100",
        price_list_version_name="2026 Q3",
        generate_two=True,
    )

    saved = await store.save(draft)
    loaded = await store.load("张三")

    assert saved.updated_at is not None
    assert loaded == saved
    assert loaded.input_mode == ContentKind.DOCUMENT


async def test_save_overwrites_previous(store):
    await store.save(FormDraft(owner="张三", transcript="第一版"))
    await store.save(FormDraft(owner="张三", transcript="第二版"))

    loaded = await store.load("张三")
    assert loaded.transcript == "第二版"


async def test_owners_are_isolated(store):
    await store.save(FormDraft(owner="张三", transcript="A"))
    await store.save(FormDraft(owner="李四", transcript="B"))

    assert (await store.load("张三")).transcript == "A"
    assert (await store.load("李四")).transcript == "B"


async def test_owner_whitespace_is_ignored(store):
    await store.save(FormDraft(owner="张三", transcript="A"))
    assert (await store.load("  张三 ")).transcript == "A"


async def test_filename_does_not_contain_owner(store):
    await store.save(FormDraft(owner="../etc/passwd"))
    files = list(store.base_path.iterdir())
    assert len(files) == 1
    assert files[0].parent == store.base_path
    assert "passwd" not in files[0].name


async def test_corrupt_file_treated_as_absent(store):
    store._draft_path("张三").write_text("{not json", encoding="utf-8")
    assert await store.load("张三") is None


async def test_undecodable_file_treated_as_absent(store):
    store._draft_path("张三").write_bytes(b'{"owner": "\xff\xfe"}')
    assert await store.load("张三") is None


async def test_newer_schema_version_treated_as_absent(store):
    payload = FormDraft(owner="张三").model_dump(mode="json")
    payload["schema_version"] = DRAFT_SCHEMA_VERSION + 1
    store._draft_path("张三").write_text(json.dumps(payload), encoding="utf-8")

    assert await store.load("张三") is None


async def test_delete(store):
    await store.save(FormDraft(owner="张三"))

    assert await store.delete("张三") is True
    assert await store.load("张三") is None
    assert await store.delete("张三") is False


@pytest.mark.parametrize("owner", ["", "   "])
async def test_empty_owner_rejected(store, owner):
    with pytest.raises(InputValidationError):
        await store.load(owner)
