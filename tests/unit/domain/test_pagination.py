from storefront_client.domain.value_objects.pagination import Pagination


def test_from_payload_reads_camel_case_block():
    pagination = Pagination.from_payload({"page": 2, "limit": 6, "total": 20, "totalPages": 4})

    assert pagination == Pagination(page=2, limit=6, total=20, total_pages=4)
    assert pagination.has_next
    assert pagination.has_previous


def test_missing_block_falls_back_to_requested_limit():
    assert Pagination.from_payload(None, limit=6) == Pagination(page=1, limit=6, total=0, total_pages=0)
    assert Pagination.from_payload(None) == Pagination(page=1, limit=10, total=0, total_pages=0)


def test_last_page_has_no_next():
    pagination = Pagination.from_payload({"page": 3, "limit": 10, "total": 25, "totalPages": 3})
    assert not pagination.has_next
