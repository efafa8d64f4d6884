# pluginregistry

A Python client for a plugin registry API. With it you can:

- browse plugins, categories, publishers, versions and reviews;
- post reviews (with a bearer token);
- look up download statistics and record downloads;
- download a plugin artifact for the current platform, with its SHA-256
  checksum and Ed25519 signature verified before you get the file.

## Installation

```
pip install pluginregistry
```

To run the test suite from a source checkout:

```
pip install ".[test]"
pytest
```

## Quick start

```python
from pluginregistry.client import Client
from pluginregistry.options import ListOptions

with Client(base_url="https://registry.example.com") as client:
    print(client.health().status)

    result = client.list_plugins(ListOptions(per_page=5, category="cloud", search="kubernetes"))
    for plugin in result.items:
        print(plugin.id, plugin.name, plugin.latest_version)
    if result.pagination is not None:
        print("total:", result.pagination.total)

    plugin = client.get_plugin("test-plugin")
    for version in client.list_versions(plugin.id).items:
        print(version.version, sorted(version.artifacts))
```

`Client` takes `base_url`, `token`, `http_client` and `timeout`. Any of them
left out falls back to its default: the registry's public base URL, no
token, and a 30-second timeout. You can pass your own `httpx.Client` as
`http_client`; the client then leaves it open on `close()`, while one it
created itself is closed. When a token is set, every API request carries an
`Authorization: Bearer ...` header.

Other read calls: `list_categories()`, `get_publisher(slug)`,
`list_publisher_plugins(slug, options)`, `list_reviews(plugin_id, options)`
and `get_version(plugin_id, version)`. The `options` argument of list calls
may be left out or `None`.

## Listing options

`ListOptions` carries paging, ordering and filtering (`page`, `per_page`,
`order_field`, `order_direction`, `search`, `category`, `featured`). Only
fields that are set end up in the query string, in alphabetical order:

```python
from pluginregistry.options import ListOptions, build_query

build_query(None)                             # ""
build_query(ListOptions())                    # ""
ListOptions(page=1, search="hello world").build_query()
# "?page=1&search=hello+world"
```

List calls return a `ListResult` with `items` and an optional `pagination`
(`page`, `per_page`, `total`, `total_pages`).

## Reviews

Creating a review needs a token:

```python
from pluginregistry.client import Client
from pluginregistry.types import CreateReviewInput

with Client(base_url="https://registry.example.com", token="token") as client:
    review = client.create_review(
        "test-plugin",
        CreateReviewInput(rating=5, title="Great", body="Works well"),
    )
    print(review.id, review.rating)
```

## Downloads

```python
with Client(base_url="https://registry.example.com") as client:
    stats = client.get_download_stats("test-plugin")
    daily = client.get_daily_downloads("test-plugin", 7)
    client.record_download("test-plugin", "1.0.0", "linux_amd64")

    url = client.get_download_url("test-plugin", "1.0.0", "linux_amd64")
    path = client.download_plugin("test-plugin", "1.0.0")
```

`get_download_url` does not follow the redirect: it returns the `Location`
of a 302 or 307 answer, raises `APIError` for a 4xx/5xx answer and
`RegistryError` for any other status.

`download_plugin` picks the artifact for `current_platform()` (for example
`linux_amd64` or `darwin_arm64`; see also `SUPPORTED_PLATFORMS` in
`pluginregistry.platform`), streams it to a temporary `.tar.gz` file, checks
its SHA-256 checksum against the registry's record and verifies the
checksum's signature. It returns the path of the file; on any failure the
file is removed and the error is raised. Removing the file after use is up
to the caller.

## Signatures

Artifacts are signed with Ed25519 over their hex checksum. The module
`pluginregistry.verify` holds the public key used for verification:

```python
from pluginregistry.verify import public_key_hex, set_public_key, verify_artifact_signature

print(public_key_hex())
set_public_key(public_key_hex_string)   # 64 hex characters; ValueError otherwise
verify_artifact_signature(checksum, signature_b64)
```

`verify_artifact_signature` returns nothing on success and raises
`UnsignedArtifactError` or `InvalidSignatureError` otherwise.

## Errors

All errors derive from `pluginregistry.errors.RegistryError`:

| Error                      | Raised when                                           |
|----------------------------|-------------------------------------------------------|
| `APIError`                 | the API answers with an error status or an unsuccessful envelope (`status_code`, `message`) |
| `UnsignedArtifactError`    | an artifact carries no signature                      |
| `InvalidSignatureError`    | a signature is malformed or does not verify           |
| `NoPlatformArtifactError`  | no artifact exists for the current platform           |
| `ChecksumMismatchError`    | a downloaded file's checksum does not match           |
| `EmptyVersionError`        | an empty version string is given                      |

A `RegistryError` itself is raised when a response cannot be decoded.
Network failures surface as `httpx` exceptions.

`is_not_found(err)` tells whether an error is, or wraps (through exception
groups, `__cause__` or `__context__`), an `APIError` with status 404:

```python
from pluginregistry.errors import APIError, is_not_found

try:
    client.get_plugin("nonexistent")
except APIError as err:
    if is_not_found(err):
        print("no such plugin")
```

## Metadata

`pluginregistry.meta.PluginMeta` describes a plugin's manifest (id, version,
name, icon, author, maintainers, tags, dependencies, capabilities, theme and
more) and converts to and from plain dictionaries with `from_dict` and
`to_dict`.

## What this package does not do

- It has no command-line tool; it is a library only.
- It is synchronous; there is no async client.
- `PluginMeta` works on dictionaries only. Reading or writing manifest
  files (JSON, YAML or otherwise) is left to the caller.
- It does not unpack downloaded artifacts or install plugins.