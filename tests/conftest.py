"""Shared test fixtures."""

import pytest
import requests

from schema_org_parser.config import FetchConfig
from schema_org_parser.domain.models import PropertyEntry, TermRecord
from schema_org_parser.fetcher import SchemaOrgFetcher


# ── Sample HTML Content ──────────────────────────────────────────────────

FULL_INDEX_HTML = """\
<!DOCTYPE html>
<html>
<head><title>Full Hierarchy - schema.org</title></head>
<body>
<h1>Full Hierarchy</h1>
<div id="thing_tree">
  <ul>
    <li class="tbranch"><a href="/Thing">Thing</a>
      <ul>
        <li class="tbranch"><a href="/Action">Action</a></li>
        <li class="tbranch"><a href="/CreativeWork">CreativeWork</a>
          <ul>
            <li class="tleaf"><a href="/Article">Article</a></li>
          </ul>
        </li>
        <li class="tleaf"><a href="Person">Person</a></li>
        <li class="tleaf"><a name="no-link">Unlinked</a></li>
        <li class="tleaf"><a href="/Action">Action</a></li>
      </ul>
    </li>
  </ul>
</div>
<div id="datatype_tree">
  <ul>
    <li class="tleaf"><a href="/Text">Text</a></li>
  </ul>
</div>
</body>
</html>
"""

PERSON_HTML = """\
<!DOCTYPE html>
<html>
<head><title>Person - schema.org Type</title></head>
<body>
<h1 property="rdfs:label" class="page-title">Person</h1>
<table class="definition-table">
  <thead>
    <tr><th>Property</th><th>Expected Type</th><th>Description</th></tr>
  </thead>
  <tbody>
    <tr typeof="rdfs:Property" resource="http://schema.org/additionalName">
      <th class="prop-nam" scope="row"><code property="rdfs:label"><a href="/additionalName">additionalName</a></code></th>
      <td class="prop-ect"><a href="/Text">Text</a>&nbsp;</td>
      <td class="prop-desc" property="rdfs:comment">An additional name for a Person, can be used for a middle name.</td>
    </tr>
    <tr typeof="rdfs:Property" resource="http://schema.org/address">
      <th class="prop-nam" scope="row"><code property="rdfs:label"><a href="/address">address</a></code></th>
      <td class="prop-ect"><a href="/PostalAddress">PostalAddress</a>&nbsp; or <br/>
        <a href="/Text">Text</a>&nbsp;</td>
      <td class="prop-desc" property="rdfs:comment">Physical address of the item.</td>
    </tr>
    <tr typeof="rdfs:Property" resource="http://schema.org/affiliation">
      <th class="prop-nam" scope="row"><code property="rdfs:label"><a href="/affiliation">affiliation</a></code></th>
      <td class="prop-ect"><a href="/Organization">Organization</a>&nbsp;</td>
      <td class="prop-desc" property="rdfs:comment">An organization that this person is affiliated with.</td>
    </tr>
  </tbody>
</table>
</body>
</html>
"""

ORDERED_ROWS_HTML = """\
<html>
<body>
<table class="definition-table">
  <tbody>
    <tr>
      <th><code>p1</code></th>
      <td class="prop-ect"><a href="/T1">T1</a> or <a href="/T2">T2</a></td>
    </tr>
    <tr>
      <th><code>p2</code></th>
      <td class="prop-ect">none given</td>
    </tr>
  </tbody>
</table>
</body>
</html>
"""

SUPERTYPE_ROWS_HTML = """\
<html>
<body>
<table class="definition-table">
  <tbody class="supertype">
    <tr class="supertype">
      <th class="supertype-name" colspan="3">Properties from <a href="/Thing">Thing</a></th>
    </tr>
  </tbody>
  <tbody>
    <tr>
      <th class="prop-nam"><code><a href="/name">name</a></code></th>
      <td class="prop-ect"><a href="/Text">Text</a></td>
    </tr>
    <tr>
      <td class="prop-ect"><a href="/URL">URL</a></td>
    </tr>
  </tbody>
</table>
</body>
</html>
"""

NO_TABLE_HTML = """\
<html>
<body>
<h1>DataType</h1>
<p>The basic data types such as Integers, Strings, etc.</p>
</body>
</html>
"""


# ── Fakes ────────────────────────────────────────────────────────────────

class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, text: str, status_code: int = 200, url: str = ''):
        self.text = text
        self.status_code = status_code
        self.url = url

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error for url: {self.url}", response=self)


class FakeSession:
    """Serves canned pages keyed by URL and records every request."""

    def __init__(self, pages: dict[str, str] | None = None, error: Exception | None = None):
        self.pages = pages or {}
        self.error = error
        self.headers: dict[str, str] = {}
        self.requests: list[tuple[str, float]] = []

    def get(self, url: str, timeout: float | None = None) -> FakeResponse:
        self.requests.append((url, timeout))
        if self.error is not None:
            raise self.error
        if url not in self.pages:
            return FakeResponse('Not Found', status_code=404, url=url)
        return FakeResponse(self.pages[url], url=url)


# ── Fixtures ─────────────────────────────────────────────────────────────

BASE_URL = 'https://schema.example'


@pytest.fixture
def fake_session():
    """Session serving the sample index and Person pages."""
    return FakeSession({
        f'{BASE_URL}/docs/full.html': FULL_INDEX_HTML,
        f'{BASE_URL}/Person': PERSON_HTML,
        f'{BASE_URL}/DataType': NO_TABLE_HTML,
        f'{BASE_URL}/Broken': '   ',
    })


@pytest.fixture
def fetcher(fake_session):
    """Fetcher bound to the fake session."""
    return SchemaOrgFetcher(FetchConfig(base_url=BASE_URL, timeout=5), session=fake_session)


@pytest.fixture
def person_record():
    """The TermRecord extracted from PERSON_HTML."""
    return TermRecord(
        term='Person',
        properties=(
            PropertyEntry('additionalName', ('Text',)),
            PropertyEntry('address', ('PostalAddress', 'Text')),
            PropertyEntry('affiliation', ('Organization',)),
        ),
    )


@pytest.fixture
def ordered_record():
    """A record with one typed and one untyped property."""
    return TermRecord(
        term='CreativeWork',
        properties=(
            PropertyEntry('p1', ('T1', 'T2')),
            PropertyEntry('p2', ()),
        ),
    )
