import asyncio
from concurrent.futures import ThreadPoolExecutor

from musicare.services.content_codec import encode_data_url
from musicare.services.stores.mock_store import MockStore

WRITERS = 8
FILES_PER_WRITER = 50


def test_concurrent_writers_get_unique_contiguous_ids():
    store = MockStore()
    content = encode_data_url(b"Hello, world!", "text/plain")

    def write_batch(writer: int) -> list[int]:
        async def _write():
            ids = []
            for n in range(FILES_PER_WRITER):
                record = await store.add_file(f"w{writer}-{n}.txt", "text/plain", 13, content, "docs")
                ids.append(record.id)
            return ids
        return asyncio.run(_write())

    with ThreadPoolExecutor(max_workers=WRITERS) as pool:
        batches = list(pool.map(write_batch, range(WRITERS)))

    ids = [i for batch in batches for i in batch]
    total = WRITERS * FILES_PER_WRITER
    assert sorted(ids) == list(range(1, total + 1))
    assert len(asyncio.run(store.list_files())) == total


def test_concurrent_person_inserts_keep_ids_unique():
    store = MockStore()

    def add(n: int) -> int:
        return asyncio.run(store.add_person(f"First{n}", f"Last{n}")).id

    with ThreadPoolExecutor(max_workers=WRITERS) as pool:
        ids = list(pool.map(add, range(200)))

    assert sorted(ids) == list(range(1, 201))
