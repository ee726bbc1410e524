"""Contract cases for the dog image catalog API (https://dog.ceo/dog-api/).

Covers three endpoints and their not-found behavior:

- ``GET /breeds/list/all``: mapping of breed -> sub-breed array
- ``GET /breed/{breed}/images``: array of image URLs for one breed
- ``GET /breeds/image/random``: a single image URL

``build_registry`` returns the full case table; the helper constructors are
public so tests can declare extra cases for other breeds.
"""

from typing import List, Optional

from ..common.config import HarnessConfig
from ..contracts.assertions import (
    Check,
    FieldCheck,
    MessageKind,
    all_items,
    contains_item,
    contains_text,
    empty,
    ends_with_any,
    has_keys,
    is_lowercase_alpha,
    non_empty,
    non_empty_string,
    size_greater_than,
    starts_with,
    unique_items,
)
from ..contracts.cases import (
    CaseMetadata,
    CaseRegistry,
    ContractCase,
    ErrorExpectation,
    Severity,
    SuccessExpectation,
)
from ..contracts.descriptor import EndpointDescriptor

EPIC = "Dog API Tests"

FEATURE_LIST_ALL = "List All Breeds"
FEATURE_BREED_IMAGES = "Images by Breed"
FEATURE_RANDOM_IMAGE = "Random Image"

LIST_ALL_PATH = "/breeds/list/all"
BREED_IMAGES_PATH = "/breed/{breed}/images"
RANDOM_IMAGE_PATH = "/breeds/image/random"

# Breeds every catalog snapshot is expected to carry.
CORE_BREEDS = ("bulldog", "hound", "retriever")


def sub_breed_checks() -> List[Check]:
    return [
        non_empty(),
        all_items("are lowercase alphabetic strings", is_lowercase_alpha),
    ]


def image_url_checks(config: HarnessConfig, breed: Optional[str] = None) -> List[Check]:
    """Checks for an array of image URLs, optionally scoped to one breed."""
    prefix = config.contract_image_url_prefix
    extensions = tuple(config.contract_image_extensions)

    checks = [
        non_empty(),
        all_items(f"start with {prefix!r}", lambda url: isinstance(url, str) and url.startswith(prefix)),
    ]
    if breed:
        fragment = f"breeds/{breed}"
        checks.append(all_items(f"contain {fragment!r}", lambda url: fragment in url))
    checks.extend([
        all_items(f"end with one of {list(extensions)}", lambda url: url.endswith(extensions)),
        unique_items(),
    ])
    return checks


def random_image_checks(config: HarnessConfig) -> List[Check]:
    return [
        non_empty_string(),
        starts_with(config.contract_image_url_prefix),
        ends_with_any(config.contract_image_extensions),
        contains_text("breeds/"),
    ]


def list_all_case(config: HarnessConfig) -> ContractCase:
    checks = [
        size_greater_than(config.contract_min_breed_count),
        has_keys(*CORE_BREEDS),
        FieldCheck("australian", MessageKind.ARRAY, sub_breed_checks() + [contains_item("shepherd")]),
        FieldCheck("affenpinscher", MessageKind.ARRAY, [empty()]),
    ]
    return ContractCase(
        name="list_all_breeds_success",
        descriptor=EndpointDescriptor(LIST_ALL_PATH),
        expectation=SuccessExpectation(MessageKind.OBJECT, tuple(checks)),
        metadata=CaseMetadata(
            feature=FEATURE_LIST_ALL,
            title="GET /breeds/list/all - Should return all dog breeds",
            severity=Severity.BLOCKER,
            epic=EPIC,
        ),
    )


def breed_images_case(config: HarnessConfig, breed: str) -> ContractCase:
    return ContractCase(
        name=f"breed_images_success[{breed}]",
        descriptor=EndpointDescriptor(BREED_IMAGES_PATH, {"breed": breed}),
        expectation=SuccessExpectation(MessageKind.ARRAY, tuple(image_url_checks(config, breed))),
        metadata=CaseMetadata(
            feature=FEATURE_BREED_IMAGES,
            title="GET /breed/{breed}/images - Should return images for a breed",
            epic=EPIC,
        ),
    )


def unknown_breed_case(config: HarnessConfig, breed: str) -> ContractCase:
    return ContractCase(
        name=f"breed_images_not_found[{breed}]",
        descriptor=EndpointDescriptor(BREED_IMAGES_PATH, {"breed": breed}, expected_status=404),
        expectation=ErrorExpectation(404, config.contract_breed_not_found_message),
        metadata=CaseMetadata(
            feature=FEATURE_BREED_IMAGES,
            title="GET /breed/{breed}/images - Invalid breed scenario",
            epic=EPIC,
        ),
    )


def random_image_case(config: HarnessConfig) -> ContractCase:
    return ContractCase(
        name="random_image_success",
        descriptor=EndpointDescriptor(RANDOM_IMAGE_PATH),
        expectation=SuccessExpectation(MessageKind.STRING, tuple(random_image_checks(config))),
        metadata=CaseMetadata(
            feature=FEATURE_RANDOM_IMAGE,
            title="GET /breeds/image/random - Should return a random image",
            epic=EPIC,
        ),
    )


def route_not_found_case(config: HarnessConfig, name: str, path: str, feature: str, title: str) -> ContractCase:
    """A path the service does not route; expects its literal 404 message."""
    return ContractCase(
        name=name,
        descriptor=EndpointDescriptor(path, expected_status=404),
        expectation=ErrorExpectation(404, config.route_not_found_message(path)),
        metadata=CaseMetadata(feature=feature, title=title, epic=EPIC),
    )


def build_registry(config: Optional[HarnessConfig] = None) -> CaseRegistry:
    """Declare the dog API case table in reporting order."""
    config = config or HarnessConfig()
    registry = CaseRegistry()

    registry.register(list_all_case(config))
    registry.register(route_not_found_case(
        config,
        name="list_all_breeds_not_found",
        path="/breeds/list/all/invalid-path",
        feature=FEATURE_LIST_ALL,
        title="GET /breeds/list/all - Invalid route scenario (404)",
    ))
    registry.register(breed_images_case(config, "hound"))
    registry.register(unknown_breed_case(config, "nonexistentbreed"))
    registry.register(random_image_case(config))
    registry.register(route_not_found_case(
        config,
        name="random_image_not_found",
        path="/breeds/image/randomm",
        feature=FEATURE_RANDOM_IMAGE,
        title="GET /breeds/image/random - Invalid path scenario",
    ))
    return registry
