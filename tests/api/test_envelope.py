from __future__ import annotations

from hr_admin_portal.api.envelope import Pagination, is_envelope, unwrap, unwrap_page


def test_unwrap_returns_data_member():
    assert unwrap({"code": 200, "status": "success", "data": {"id": 1}}) == {"id": 1}
    assert unwrap({"id": 1}) == {"id": 1}
    assert not is_envelope({"data": []})


def test_page_with_root_pagination():
    page = unwrap_page(
        {
            "code": 200,
            "status": "success",
            "data": [{"id": 1}, {"id": 2}],
            "pagination": {"page": 1, "limit": 2, "total": 5, "totalPages": 3},
        }
    )
    assert len(page.items) == 2
    assert page.pagination == Pagination(page=1, limit=2, total=5, total_pages=3)
    assert page.pagination.has_next


def test_nested_envelope_with_outer_pagination():
    page = unwrap_page(
        {
            "code": 200,
            "status": "success",
            "data": {"code": 200, "status": "success", "data": [{"id": "a"}]},
            "pagination": {"page": 2, "limit": 10, "total": 11, "totalPages": 2},
        }
    )
    assert page.items == [{"id": "a"}]
    assert not page.pagination.has_next


def test_audit_shape_and_plain_list():
    page = unwrap_page({"data": [{"id": 1}], "total": 1, "page": 1, "limit": 20, "totalPages": 1})
    assert page.pagination.total == 1
    assert page.pagination.limit == 20

    plain = unwrap_page([{"id": 1}])
    assert plain.items == [{"id": 1}]
    assert plain.pagination is None
    assert unwrap_page(None).items == []
