"""Unit tests for the TestService double: matching, single-use consumption, verification."""
from __future__ import annotations

import asyncio

import pytest

from networking.domain.behavior import HeadersBehavior
from networking.domain.body import JsonBody
from networking.domain.configuration import Configuration
from networking.domain.errors import ApiError, InvalidURL
from networking.domain.request import HttpMethod, Request
from networking.domain.resource import Resource
from networking.domain.result import Failure, Success
from networking.infrastructure.decoding.pydantic_decoder import PydanticDecoder
from networking.testing.service import CannedResponse, ContractViolation, TestService
from tests.fakes import Episode, RecordingBehavior

DECODER = PydanticDecoder()


def _episodes(**kwargs) -> Resource:
    return Resource.decodable(Request("episodes.json", **kwargs), list[Episode], DECODER)


def _dispatch(service: TestService, resource: Resource):
    results = []
    service.dispatch(resource, results.append)
    return results


def test_scripted_response_is_delivered_then_verify_passes(configuration):
    episodes = [Episode(id="1", title="Test")]
    service = TestService(configuration, [CannedResponse(_episodes(), Success(episodes))])

    results = _dispatch(service, _episodes())

    assert results == [Success(episodes)]
    service.verify()


def test_second_dispatch_after_consumption_is_a_contract_violation(configuration):
    service = TestService(configuration, [CannedResponse(_episodes(), Success([]))])
    _dispatch(service, _episodes())

    with pytest.raises(ContractViolation, match="no canned response"):
        _dispatch(service, _episodes())


def test_verify_fails_when_a_registered_response_was_never_requested(configuration):
    service = TestService(configuration)
    service.register(_episodes(), Success([]))
    service.register(Resource.empty(Request("logout", method=HttpMethod.POST)), Success(None))

    _dispatch(service, _episodes())

    with pytest.raises(ContractViolation, match="never requested") as exc_info:
        service.verify()
    assert "POST http://localhost:8000/logout" in str(exc_info.value)
    assert len(service.pending) == 1


def test_registered_entry_without_script_is_a_contract_violation(configuration):
    service = TestService(configuration, [CannedResponse(_episodes(), None)])

    with pytest.raises(ContractViolation, match="no scripted result"):
        _dispatch(service, _episodes())
    assert len(service.pending) == 1


def test_scripted_value_of_wrong_type_is_a_contract_violation(configuration):
    service = TestService(configuration, [CannedResponse(_episodes(), Success("not a list of episodes"))])

    with pytest.raises(ContractViolation, match="is not a"):
        _dispatch(service, _episodes())


def test_scripted_failure_is_delivered_as_failure(configuration):
    service = TestService(configuration, [CannedResponse(_episodes(), Failure(ApiError(404)))])

    assert _dispatch(service, _episodes()) == [Failure(ApiError(404))]
    service.verify()


def test_matching_compares_method_url_headers_and_body(configuration):
    body = JsonBody({"title": "Pilot"})
    registered = Resource.empty(Request("episodes", method=HttpMethod.POST, body=body, headers={"X-Trace": "1"}))
    service = TestService(configuration, [CannedResponse(registered, Success(None))])

    mismatches = [
        Request("episodes", method=HttpMethod.PUT, body=body, headers={"X-Trace": "1"}),
        Request("episodes", method=HttpMethod.POST, body=body, headers={"X-Trace": "1"}, parameters={"v": 2}),
        Request("episodes", method=HttpMethod.POST, body=body, headers={"X-Trace": "2"}),
        Request("episodes", method=HttpMethod.POST, body=JsonBody({"title": "Other"}), headers={"X-Trace": "1"}),
    ]
    for request in mismatches:
        with pytest.raises(ContractViolation):
            _dispatch(service, Resource.empty(request))

    fresh_equal = Request("episodes", method=HttpMethod.POST, body=JsonBody({"title": "Pilot"}), headers={"x-trace": "1"})
    assert _dispatch(service, Resource.empty(fresh_equal)) == [Success(None)]
    service.verify()


def test_first_matching_entry_is_consumed_first(configuration):
    service = TestService(configuration)
    service.register(_episodes(), Success([Episode(id="1", title="First")]))
    service.register(_episodes(), Success([Episode(id="2", title="Second")]))

    first = _dispatch(service, _episodes())
    second = _dispatch(service, _episodes())

    assert first == [Success([Episode(id="1", title="First")])]
    assert second == [Success([Episode(id="2", title="Second")])]
    service.verify()


def test_behaviors_fire_around_canned_responses(configuration):
    events: list[str] = []
    service = TestService(configuration, behavior=RecordingBehavior("service", events))
    resource = _episodes(behavior=RecordingBehavior("request", events))
    service.register(resource, Failure(ApiError(500)))

    service.dispatch(resource, lambda result: events.append("complete"))

    assert events == [
        "before_send:service",
        "before_send:request",
        "after_receive:service",
        "after_receive:request",
        "complete",
    ]


def test_service_behavior_headers_take_part_in_matching():
    configuration = Configuration("http://localhost:8000", headers={"Accept": "application/json"})
    service = TestService(configuration, behavior=HeadersBehavior({"X-Client": "tests"}))
    service.register(_episodes(), Success([]))

    assert _dispatch(service, _episodes()) == [Success([])]


def test_configuration_base_path_match_is_case_insensitive():
    assert Configuration("http://LOCALHOST:8000") == Configuration("http://localhost:8000")


def test_build_failure_is_reported_as_failure(configuration):
    service = TestService(configuration)

    results = _dispatch(service, Resource.empty(Request("bad\npath")))

    assert isinstance(results[0].error, InvalidURL)


def test_fetch_and_context_manager(configuration):
    episodes = [Episode(id="1", title="Test")]

    async def scenario():
        async with TestService(configuration, [CannedResponse(_episodes(), Success(episodes))]) as service:
            result = await service.fetch(_episodes())
            service.verify()
            return result

    assert asyncio.run(scenario()) == Success(episodes)


def test_mapped_resource_skips_type_check(configuration):
    titles = _episodes().map(lambda episodes: [e.title for e in episodes])
    service = TestService(configuration, [CannedResponse(titles, Success(["Test"]))])

    assert _dispatch(service, titles) == [Success(["Test"])]
