# apps/core/client.py
"""
Python client for the portal JSON API.

One call is one HTTP round trip: nothing is retried, nothing is cached.
Failures surface as ``TransportError`` carrying the endpoint's ``error``
text when it sent one.
"""
import logging
from typing import Any, Dict, List, Optional

import httpx
from django.conf import settings

from apps.core.exceptions import TransportError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = 'http://localhost:8000/api'


class PortalClient:
    def __init__(self, base_url: Optional[str] = None, *,
                 http: Optional[httpx.Client] = None,
                 transport: Optional[httpx.BaseTransport] = None,
                 timeout: Optional[float] = None):
        if base_url is None:
            base_url = getattr(settings, 'HSGA_API_BASE_URL', DEFAULT_BASE_URL)
        self.base_url = base_url.rstrip('/')
        if http is None:
            # No explicit timeout by default: a hung request stays pending
            # until the transport resolves or errors
            http = httpx.Client(
                base_url=self.base_url,
                transport=transport,
                timeout=timeout,
                headers={'Accept': 'application/json'},
            )
        self.http = http

    def close(self):
        self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    # ---------- plumbing ----------

    def _request(self, method: str, path: str, *, fallback_error: str,
                 json: Any = None, params: Optional[Dict[str, Any]] = None) -> Any:
        try:
            response = self.http.request(method, path, json=json, params=params)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise TransportError() from exc

        if response.is_success:
            if not response.content:
                return None
            try:
                return response.json()
            except ValueError as exc:
                raise TransportError() from exc

        message = None
        try:
            data = response.json()
            if isinstance(data, dict):
                message = data.get('error')
        except ValueError:
            pass

        logger.info("%s %s answered %s: %s", method, path, response.status_code, message)
        raise TransportError(message or fallback_error, status_code=response.status_code)

    # ---------- calendar ----------

    def list_events(self) -> List[Dict[str, Any]]:
        data = self._request('GET', '/events', fallback_error='Failed to fetch events')
        if not isinstance(data, list):
            logger.error("Events endpoint returned non-array data: %r", data)
            return []
        return data

    def create_event(self, title: str, date: str, description: str = '') -> Dict[str, Any]:
        return self._request(
            'POST', '/events',
            json={'title': title, 'date': date, 'description': description},
            fallback_error='Failed to create event',
        )

    def delete_event(self, event_id) -> None:
        self._request(
            'DELETE', '/events', params={'id': str(event_id)},
            fallback_error='Failed to delete event',
        )

    # ---------- public forms ----------

    def submit_admission(self, payload: Dict[str, Any]) -> Any:
        return self._request(
            'POST', '/forms/student-admission', json=payload,
            fallback_error='Submission failed',
        )

    def list_admissions(self) -> List[Dict[str, Any]]:
        return self._request(
            'GET', '/forms/student-admission',
            fallback_error='Failed to fetch submissions',
        )

    def register_institution(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._request(
            'POST', '/forms/insti-registration', json=payload,
            fallback_error='Failed to submit registration',
        )

    def register_trainer(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._request(
            'POST', '/forms/trainer-registration', json=payload,
            fallback_error='Registration failed',
        )

    # ---------- admin ----------

    def login(self, username: str, password: str) -> Dict[str, Any]:
        return self._request(
            'POST', '/admin/login',
            json={'username': username, 'password': password},
            fallback_error='Login failed',
        )

    def logout(self) -> None:
        self._request('POST', '/admin/logout', fallback_error='Logout failed')

    def list_institutions(self) -> List[Dict[str, Any]]:
        return self._request('GET', '/admin/insti', fallback_error='Failed to fetch institutions')

    def list_approved_trainers(self) -> List[Dict[str, Any]]:
        return self._request(
            'GET', '/admin/trainers/approved',
            fallback_error='Failed to fetch trainers',
        )

    def set_institution_status(self, institution_id, status: str) -> Dict[str, Any]:
        return self._request(
            'PATCH', f'/admin/insti/{institution_id}/status',
            json={'status': status},
            fallback_error='Failed to update status',
        )

    def assign_trainer(self, institution_id, trainer_id: str) -> Dict[str, Any]:
        return self._request(
            'PATCH', f'/admin/insti/{institution_id}/assign-trainer',
            json={'trainerId': trainer_id},
            fallback_error='Failed to assign trainer',
        )
