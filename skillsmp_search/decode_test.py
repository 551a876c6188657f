"""Unit tests for decode module."""

import json

import pytest

from .decode import decode
from .errors import DecodeError
from .models import ApiResponse, Skill


def _skill(**overrides):
    skill = {
        "id": "s1",
        "name": "Foo",
        "author": "bar",
        "description": "Does foo things",
        "githubUrl": "https://github.com/bar/foo",
        "skillUrl": "https://skillsmp.com/skills/foo",
        "stars": 42,
    }
    skill.update(overrides)
    return skill


def _pagination(**overrides):
    pagination = {
        "page": 1,
        "limit": 10,
        "total": 1,
        "totalPages": 1,
        "hasNext": False,
        "hasPrev": False,
    }
    pagination.update(overrides)
    return pagination


def _body(skills=None, **envelope):
    payload = {
        "success": True,
        "data": {"skills": skills if skills is not None else [_skill()], "pagination": _pagination()},
    }
    payload.update(envelope)
    return json.dumps(payload).encode()


def describe_decode():

    def describe_success_payload():

        def it_decodes_the_envelope():
            resp = decode(_body())
            assert resp.success is True
            assert resp.error is None
            assert len(resp.data.skills) == 1

        def it_renames_camel_case_fields():
            skill = decode(_body()).data.skills[0]
            assert skill.github_url == "https://github.com/bar/foo"
            assert skill.skill_url == "https://skillsmp.com/skills/foo"

        def it_decodes_pagination():
            p = decode(_body()).data.pagination
            assert (p.page, p.limit, p.total, p.total_pages) == (1, 10, 1, 1)
            assert p.has_next is False
            assert p.has_prev is False

        def it_accepts_str_bodies():
            assert decode(_body().decode()) == decode(_body())

        def it_ignores_unknown_fields():
            resp = decode(_body(skills=[_skill(updatedAt=1700000000, tags=["x"])], meta={"v": 2}))
            assert resp.data.skills[0].name == "Foo"

        def it_preserves_skill_order():
            skills = [_skill(id=str(i), name=f"skill-{i}") for i in range(5)]
            names = [s.name for s in decode(_body(skills=skills)).data.skills]
            assert names == [f"skill-{i}" for i in range(5)]

    def describe_optional_fields():

        def it_treats_null_skill_fields_as_absent():
            skill = decode(
                _body(skills=[_skill(description=None, githubUrl=None, skillUrl=None, stars=None)])
            ).data.skills[0]
            assert skill.description is None
            assert skill.github_url is None
            assert skill.skill_url is None
            assert skill.stars is None

        def it_treats_missing_skill_fields_as_absent():
            raw = {"id": "s1", "name": "Foo", "author": "bar"}
            skill = decode(_body(skills=[raw])).data.skills[0]
            assert skill == Skill(id="s1", name="Foo", author="bar")

        def it_decodes_an_empty_object():
            assert decode(b"{}") == ApiResponse()

        def it_decodes_null_envelope_fields():
            resp = decode(b'{"success": null, "data": null, "error": null}')
            assert resp == ApiResponse()

        def it_decodes_an_error_payload():
            resp = decode(b'{"success": false, "error": {"code": "RATE_LIMITED", "message": "Rate limited"}}')
            assert resp.success is False
            assert resp.data is None
            assert resp.error.code == "RATE_LIMITED"
            assert resp.error.message == "Rate limited"

        def it_decodes_an_error_without_details():
            resp = decode(b'{"success": false, "error": {}}')
            assert resp.error.code is None
            assert resp.error.message is None

    def describe_failures():

        def it_rejects_invalid_json():
            with pytest.raises(DecodeError):
                decode(b"<html>Bad Gateway</html>")

        def it_rejects_an_empty_body():
            with pytest.raises(DecodeError):
                decode(b"")

        def it_rejects_stars_as_string():
            with pytest.raises(DecodeError, match="stars"):
                decode(_body(skills=[_skill(stars="42")]))

        def it_rejects_negative_stars():
            with pytest.raises(DecodeError):
                decode(_body(skills=[_skill(stars=-1)]))

        def it_rejects_success_as_string():
            with pytest.raises(DecodeError):
                decode(b'{"success": "true"}')

        def it_rejects_a_missing_required_skill_field():
            raw = {"id": "s1", "name": "Foo"}
            with pytest.raises(DecodeError, match="author"):
                decode(_body(skills=[raw]))

        def it_rejects_missing_pagination():
            with pytest.raises(DecodeError):
                decode(b'{"success": true, "data": {"skills": []}}')

        def it_rejects_a_non_object_body():
            with pytest.raises(DecodeError):
                decode(b"[]")

        def it_chains_the_validation_error():
            with pytest.raises(DecodeError) as exc_info:
                decode(b"not json")
            assert exc_info.value.__cause__ is not None

    def it_is_idempotent():
        body = _body(skills=[_skill(), _skill(id="s2", name="Baz", stars=None)])
        assert decode(body) == decode(body)
