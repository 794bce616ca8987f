"""Test configuration for the provider test suite."""

import json
import os
from typing import Any, Dict, Iterable, List, Optional, Tuple

import pytest

# Keep the developer's controller settings out of the test run.
# This must happen before any imports that read Settings from the environment
for _name in (
    "AAP_HOST",
    "AAP_USERNAME",
    "AAP_PASSWORD",
    "AAP_INSECURE_SKIP_VERIFY",
    "AAP_TIMEOUT_SECONDS",
):
    os.environ.pop(_name, None)

from aap_provider.services.transport import TransportResponse  # noqa: E402


LAUNCH_TEMPLATE_1 = {"job_type": "check", "url": "/api/v2/jobs/1/", "status": "running"}
LAUNCH_TEMPLATE_2 = {
    "job_type": "check",
    "url": "/api/v2/jobs/2/",
    "playbook": "ansible_aws.yaml",
}
JOB_1 = {"job_type": "check", "url": "/api/v2/jobs/1/", "status": "running", "id": 1}
JOB_2 = {"status": "complete", "execution_environment": 3}

DEFAULT_ROUTES: Dict[str, Dict[str, Any]] = {
    "/api/v2/job_templates/1/launch/": LAUNCH_TEMPLATE_1,
    "/api/v2/job_templates/2/launch/": LAUNCH_TEMPLATE_2,
    "/api/v2/jobs/1/": JOB_1,
    "/api/v2/jobs/2/": JOB_2,
}


class FakeTransport:
    """Transport answering from a table of canned JSON documents keyed by path.

    - a method outside ``accept_methods`` gets 405 with an empty body
    - an unknown path gets 404 with an empty body
    - a JSON request body is merged into the canned document, so tests can
      see what was sent
    """

    def __init__(
        self,
        routes: Optional[Dict[str, Dict[str, Any]]] = None,
        accept_methods: Iterable[str] = ("GET", "POST"),
        status_code: int = 200,
    ):
        self.routes = dict(DEFAULT_ROUTES if routes is None else routes)
        self.accept_methods = {method.upper() for method in accept_methods}
        self.status_code = status_code
        self.calls: List[Tuple[str, str, Optional[bytes]]] = []

    def do_request(
        self, method: str, path: str, body: Optional[bytes] = None
    ) -> TransportResponse:
        self.calls.append((method, path, body))

        if method.upper() not in self.accept_methods:
            return TransportResponse(status_code=405)

        document = self.routes.get(path)
        if document is None:
            return TransportResponse(status_code=404)

        payload = dict(document)
        if body is not None:
            payload.update(json.loads(body))
        return TransportResponse(
            status_code=self.status_code,
            body=json.dumps(payload).encode("utf-8"),
        )

    def sent_json(self, index: int = -1) -> Optional[Dict[str, Any]]:
        body = self.calls[index][2]
        return None if body is None else json.loads(body)


@pytest.fixture
def fake_transport():
    """Factory for fake transports with custom routes, verbs and status."""

    return FakeTransport


@pytest.fixture(autouse=True)
def isolated_working_directory(tmp_path, monkeypatch):
    """Run each test where no developer ``.env`` file can be picked up."""

    monkeypatch.chdir(tmp_path)
    return tmp_path
