from crmkit.content import Content, ContentType, MaterializeRequest, Publisher


def test_as_str_name_matches_definition():
    assert ContentType.MOVIE.as_str_name() == "CONTENT_TYPE_MOVIE"
    assert ContentType.AI_GENERATED.as_str_name() == "CONTENT_TYPE_AI_GENERATED"


def test_str_name_round_trip_for_every_type():
    for member in ContentType:
        assert ContentType.from_str_name(member.as_str_name()) is member


def test_from_str_name_unknown():
    assert ContentType.from_str_name("CONTENT_TYPE_PODCAST") is None
    assert ContentType.from_str_name("MOVIE") is None
    assert ContentType.from_str_name("") is None


def test_content_defaults():
    content = Content()
    assert content.content_type is ContentType.UNSPECIFIED
    assert content.publishers == []
    assert content.created_at is None


def test_to_body_includes_fields():
    content = Content(id=7, name="Sample", publishers=[Publisher(id=10001, name="Pub")])
    body = content.to_body()
    assert body.startswith("Content: ")
    assert "Sample" in body
    assert "Pub" in body


def test_materialize_requests_deduplicate():
    reqs = {MaterializeRequest(1), MaterializeRequest(1), MaterializeRequest(2)}
    assert reqs == {MaterializeRequest(1), MaterializeRequest(2)}