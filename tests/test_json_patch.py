import pytest

from app.api.schemas.contacts import ContactForUpdate
from app.application.json_patch import PatchEngine, PatchField, PatchOp, parse_patch_document
from app.domain.errors import PatchRejectedError


@pytest.fixture
def engine() -> PatchEngine:
    return PatchEngine()


@pytest.fixture
def base() -> ContactForUpdate:
    return ContactForUpdate.model_construct(
        first_name="Jan", last_name="Kowalski", email="jkowalski@u.pl"
    )


def _apply(engine, base, document):
    return engine.apply(base, parse_patch_document(document))


class TestParsing:
    def test_document_must_be_an_array(self):
        with pytest.raises(PatchRejectedError) as exc_info:
            parse_patch_document({"op": "replace"})
        assert exc_info.value.reason == PatchRejectedError.MALFORMED_DOCUMENT
        assert exc_info.value.status_code == 400

    def test_none_document_is_malformed(self):
        with pytest.raises(PatchRejectedError) as exc_info:
            parse_patch_document(None)
        assert exc_info.value.reason == PatchRejectedError.MALFORMED_DOCUMENT

    def test_unknown_op_is_invalid(self):
        with pytest.raises(PatchRejectedError) as exc_info:
            parse_patch_document([{"op": "increment", "path": "/firstName"}])
        assert exc_info.value.reason == PatchRejectedError.INVALID_OPERATION
        assert exc_info.value.status_code == 422

    def test_replace_without_value_is_invalid(self):
        with pytest.raises(PatchRejectedError) as exc_info:
            parse_patch_document([{"op": "replace", "path": "/firstName"}])
        assert exc_info.value.reason == PatchRejectedError.INVALID_OPERATION

    def test_move_without_from_is_invalid(self):
        with pytest.raises(PatchRejectedError) as exc_info:
            parse_patch_document([{"op": "move", "path": "/firstName"}])
        assert exc_info.value.reason == PatchRejectedError.INVALID_OPERATION

    @pytest.mark.parametrize("pointer", ["/phones", "/firstName/0", "", "firstName", "/id"])
    def test_unknown_paths_do_not_resolve(self, pointer):
        with pytest.raises(PatchRejectedError) as exc_info:
            PatchField.from_pointer(pointer)
        assert exc_info.value.reason == PatchRejectedError.PATH_NOT_FOUND

    def test_paths_are_case_insensitive(self):
        assert PatchField.from_pointer("/FirstName") == PatchField.FIRST_NAME
        assert PatchField.from_pointer("/EMAIL") == PatchField.EMAIL

    def test_null_value_is_kept(self):
        [operation] = parse_patch_document([{"op": "add", "path": "/email", "value": None}])
        assert operation.op == PatchOp.ADD
        assert operation.value is None


class TestApply:
    def test_replace_changes_only_the_target(self, engine, base):
        result = _apply(engine, base, [{"op": "replace", "path": "/firstName", "value": "Janek"}])
        assert result.is_valid
        assert result.representation.first_name == "Janek"
        assert result.representation.last_name == "Kowalski"
        assert result.representation.email == "jkowalski@u.pl"

    def test_remove_email_leaves_it_empty(self, engine, base):
        result = _apply(engine, base, [{"op": "remove", "path": "/email"}])
        assert result.is_valid
        assert result.representation.email is None

    def test_remove_required_field_fails_validation(self, engine, base):
        result = _apply(engine, base, [{"op": "remove", "path": "/lastName"}])
        assert not result.is_valid
        assert result.representation is None
        assert result.errors

    def test_copy_to_equal_names_breaks_domain_rule(self, engine, base):
        result = _apply(engine, base, [{"op": "copy", "from": "/lastName", "path": "/firstName"}])
        assert not result.is_valid
        assert ("wrongName", "First name and last name cannot be the same.") in result.errors

    def test_move_clears_the_source(self, engine, base):
        document = engine.apply_operations(
            base.model_dump(by_alias=True),
            parse_patch_document([{"op": "move", "from": "/firstName", "path": "/lastName"}]),
        )
        assert document["lastName"] == "Jan"
        assert document["firstName"] is None

    def test_move_onto_itself_is_a_no_op(self, engine, base):
        result = _apply(engine, base, [{"op": "move", "from": "/email", "path": "/email"}])
        assert result.is_valid
        assert result.representation.email == "jkowalski@u.pl"

    def test_failed_test_rejects_the_document(self, engine, base):
        document = [
            {"op": "replace", "path": "/firstName", "value": "Janek"},
            {"op": "test", "path": "/lastName", "value": "Nowak"},
        ]
        with pytest.raises(PatchRejectedError) as exc_info:
            _apply(engine, base, document)
        assert exc_info.value.reason == PatchRejectedError.TEST_FAILED

    def test_passing_test_then_replace(self, engine, base):
        document = [
            {"op": "test", "path": "/lastName", "value": "Kowalski"},
            {"op": "replace", "path": "/lastName", "value": "Kowalska"},
        ]
        result = _apply(engine, base, document)
        assert result.representation.last_name == "Kowalska"

    def test_operations_run_on_a_copy(self, engine, base):
        original = base.model_dump(by_alias=True)
        engine.apply_operations(
            original, parse_patch_document([{"op": "remove", "path": "/email"}])
        )
        assert original["email"] == "jkowalski@u.pl"

    def test_invalid_email_is_reported(self, engine, base):
        result = _apply(engine, base, [{"op": "replace", "path": "/email", "value": "not-an-email"}])
        assert not result.is_valid
        assert any(field == "email" for field, _ in result.errors)

    def test_email_keeps_the_casing_sent(self, engine, base):
        result = _apply(engine, base, [{"op": "replace", "path": "/email", "value": "Jan.K@Example.COM"}])
        assert result.representation.email == "Jan.K@Example.COM"
