"""Tests for the dog API case table, run offline against the fake API."""

import httpx
import pytest

from contract_harness.contracts.cases import CaseRegistry, Severity
from contract_harness.contracts.client import ContractClient
from contract_harness.contracts.errors import AssertionFailure
from contract_harness.suites.dog_api import (
    FEATURE_BREED_IMAGES,
    FEATURE_LIST_ALL,
    FEATURE_RANDOM_IMAGE,
    breed_images_case,
    build_registry,
    list_all_case,
    random_image_case,
    unknown_breed_case,
)

from .fake_dog_api import BREEDS, HOUND_IMAGES


def replace(path, message):
    """Override one route with a success envelope carrying ``message``."""
    return {path: lambda request: httpx.Response(200, json={"status": "success", "message": message})}


class TestRegistry:
    """Test the case table itself."""

    def test_declared_cases(self, fake_config):
        registry = build_registry(fake_config)
        assert registry.names() == [
            "list_all_breeds_success",
            "list_all_breeds_not_found",
            "breed_images_success[hound]",
            "breed_images_not_found[nonexistentbreed]",
            "random_image_success",
            "random_image_not_found",
        ]

    def test_features(self, fake_config):
        registry = build_registry(fake_config)
        assert len(registry.by_feature(FEATURE_LIST_ALL)) == 2
        assert len(registry.by_feature(FEATURE_BREED_IMAGES)) == 2
        assert len(registry.by_feature(FEATURE_RANDOM_IMAGE)) == 2

    def test_metadata_properties(self, fake_config):
        case = build_registry(fake_config).get("list_all_breeds_success")
        assert case.metadata.severity is Severity.BLOCKER
        assert case.metadata.as_properties() == {
            "feature": "List All Breeds",
            "title": "GET /breeds/list/all - Should return all dog breeds",
            "severity": "blocker",
            "epic": "Dog API Tests",
        }

    def test_route_not_found_messages(self, fake_config):
        registry = build_registry(fake_config)
        assert registry.get("list_all_breeds_not_found").expectation.message == (
            'No route found for "GET http://dog.ceo/api/breeds/list/all/invalid-path" with code: 0'
        )
        assert registry.get("random_image_not_found").descriptor.expected_status == 404

    def test_duplicate_names_rejected(self, fake_config):
        registry = CaseRegistry()
        registry.register(random_image_case(fake_config))
        with pytest.raises(ValueError, match="already registered"):
            registry.register(random_image_case(fake_config))

    def test_unknown_case(self):
        with pytest.raises(KeyError, match="Unknown contract case"):
            CaseRegistry().get("missing")


@pytest.mark.asyncio
async def test_all_cases_pass_against_fake_api(fake_config, dog_api_transport):
    """Test every declared case holds for a well-behaved service."""
    registry = build_registry(fake_config)
    async with ContractClient(fake_config, transport=dog_api_transport()) as client:
        for case in registry:
            await client.execute(case)


@pytest.mark.asyncio
@pytest.mark.parametrize("breed", ["affenpinscher", "australian", "retriever"])
async def test_breed_images_for_other_breeds(fake_config, dog_api_transport, breed):
    async with ContractClient(fake_config, transport=dog_api_transport()) as client:
        images = await client.execute(breed_images_case(fake_config, breed))
    assert all(f"breeds/{breed}" in url for url in images)


@pytest.mark.asyncio
async def test_list_all_returns_message(fake_config, dog_api_transport):
    async with ContractClient(fake_config, transport=dog_api_transport()) as client:
        breeds = await client.execute(list_all_case(fake_config))
    assert breeds == BREEDS


@pytest.mark.asyncio
async def test_unknown_breed_returns_none(fake_config, dog_api_transport):
    async with ContractClient(fake_config, transport=dog_api_transport()) as client:
        assert await client.execute(unknown_breed_case(fake_config, "notadog")) is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "breeds, expected",
    [
        ({**BREEDS, "australian": []}, "message.australian: expected at least one element"),
        ({**BREEDS, "australian": ["Shepherd"]}, "message.australian: expected all elements are lowercase"),
        ({**BREEDS, "affenpinscher": ["miniature"]}, "message.affenpinscher: expected no elements"),
        ({k: v for k, v in BREEDS.items() if k != "retriever"}, "expected keys"),
    ],
)
async def test_list_all_contract_violations(fake_config, dog_api_transport, breeds, expected):
    transport = dog_api_transport(replace("/api/breeds/list/all", breeds))
    async with ContractClient(fake_config, transport=transport) as client:
        with pytest.raises(AssertionFailure, match=expected):
            await client.execute(list_all_case(fake_config))


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "images, expected",
    [
        ([], "expected at least one element"),
        (["http://images.dog.ceo/breeds/hound-afghan/1.jpg"], "expected all elements start with"),
        (["https://images.dog.ceo/breeds/pug/1.jpg"], "expected all elements contain 'breeds/hound'"),
        (["https://images.dog.ceo/breeds/hound-afghan/1.gif"], "expected all elements end with"),
        (HOUND_IMAGES + HOUND_IMAGES[:1], "expected no duplicate elements"),
    ],
)
async def test_breed_images_contract_violations(fake_config, dog_api_transport, images, expected):
    transport = dog_api_transport(replace("/api/breed/hound/images", images))
    async with ContractClient(fake_config, transport=transport) as client:
        with pytest.raises(AssertionFailure, match=expected):
            await client.execute(breed_images_case(fake_config, "hound"))


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "message, expected",
    [
        ("", "expected a non-empty string"),
        (HOUND_IMAGES, "expected a JSON string"),
        ("https://example.com/breeds/hound/1.jpg", "expected to start with"),
        ("https://images.dog.ceo/breeds/hound-afghan/1.webp", "expected to end with one of"),
    ],
)
async def test_random_image_contract_violations(fake_config, dog_api_transport, message, expected):
    transport = dog_api_transport(replace("/api/breeds/image/random", message))
    async with ContractClient(fake_config, transport=transport) as client:
        with pytest.raises(AssertionFailure, match=expected):
            await client.execute(random_image_case(fake_config))


@pytest.mark.asyncio
async def test_unexpected_status_reported_first(fake_config, dog_api_transport):
    transport = dog_api_transport({
        "/api/breed/nonexistentbreed/images": lambda request: httpx.Response(
            200, json={"status": "success", "message": []}
        ),
    })
    async with ContractClient(fake_config, transport=transport) as client:
        with pytest.raises(AssertionFailure, match="http status: expected 404, got 200"):
            await client.execute(unknown_breed_case(fake_config, "nonexistentbreed"))
