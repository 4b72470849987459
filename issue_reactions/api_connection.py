"""GitHub API connection for making requests and handling pagination."""

import os
import logging
from typing import Any, Callable, Dict, Optional, Tuple
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .models import ApiOptions

DEFAULT_API_URL = 'https://api.github.com'
DEFAULT_USER_AGENT = 'issue-reactions/0.1'
DEFAULT_PAGE_SIZE = 100
GITHUB_API_VERSION = '2022-11-28'


class ApiConnection:
    """Sends GitHub REST requests and deserializes the responses."""

    def __init__(self, token: str = None, base_url: str = DEFAULT_API_URL,
                 user_agent: str = DEFAULT_USER_AGENT):
        """Initialize the connection.

        Args:
            token: GitHub personal access token for authentication
            base_url: API root, override for GitHub Enterprise
            user_agent: Value of the User-Agent header
        """
        # Use provided token or fall back to environment variable
        self.token = token or os.environ.get('GITHUB_TOKEN')
        self.base_url = base_url.rstrip('/')
        self.session = requests.Session()

        # Only idempotent requests are retried; a repeated POST would create a second reaction
        adapter = HTTPAdapter(
            max_retries=Retry(
                total=3,
                backoff_factor=0.3,
                status_forcelist=[500, 502, 503, 504],
                allowed_methods=frozenset(['GET', 'HEAD', 'OPTIONS', 'DELETE']),
                raise_on_status=False
            )
        )
        self.session.mount('https://', adapter)
        self.session.mount('http://', adapter)

        self.session.headers.update({
            'Accept': 'application/vnd.github+json',
            'X-GitHub-Api-Version': GITHUB_API_VERSION,
            'User-Agent': user_agent
        })

        if self.token:
            self.session.headers['Authorization'] = f'Bearer {self.token}'
            logging.info("Initialized GitHub API connection with token")
        else:
            logging.warning("No GitHub token provided. Rate limits will be much lower.")
            logging.warning("Set GITHUB_TOKEN environment variable or pass token as argument.")

    @classmethod
    def from_config(cls, config) -> 'ApiConnection':
        """Create a connection from a ClientConfig."""
        return cls(token=config.token, base_url=config.base_url, user_agent=config.user_agent)

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def build_url(self, path: str) -> str:
        """Join an API path onto the base URL; absolute URLs pass through."""
        if path.startswith('http://') or path.startswith('https://'):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    def _check_response(self, response: requests.Response, url: str):
        if response.status_code in (403, 429):
            logging.error(f"Request to {url} was refused ({response.status_code}), "
                          f"possibly rate limited. Response: {response.text}")

        response.raise_for_status()

    def get_all(self, path: str, params: Dict = None, options: ApiOptions = ApiOptions.NONE,
                parse: Optional[Callable[[Dict], Any]] = None) -> Tuple[Any, ...]:
        """Fetch every page of a paginated GitHub API endpoint.

        Args:
            path: The API path or absolute URL
            params: Extra query parameters
            options: Page size, start page and page limit
            parse: Optional callable turning each JSON item into a model

        Returns:
            Tuple of all items from all fetched pages, in server order

        Raises:
            requests.exceptions.HTTPError: If GitHub answers with an error status
        """
        url = self.build_url(path)
        results = []
        per_page = options.page_size or DEFAULT_PAGE_SIZE
        page = options.start_page or 1
        pages_fetched = 0

        params = dict(params) if params else {}
        params['per_page'] = per_page

        while True:
            params['page'] = page
            logging.debug(f"Fetching page {page} from {url}")
            response = self.session.get(url, params=params)
            self._check_response(response, url)
            data = response.json()

            if not data:
                break

            results.extend(parse(item) if parse else item for item in data)
            pages_fetched += 1

            if options.page_count and pages_fetched >= options.page_count:
                logging.debug(f"Stopping after {pages_fetched} page(s) as requested")
                break

            # GitHub advertises further pages in the Link header
            if not response.links.get('next'):
                break

            page += 1

        logging.debug(f"Fetched {len(results)} total items from {url}")
        return tuple(results)

    def post(self, path: str, body: Dict, parse: Optional[Callable[[Dict], Any]] = None) -> Any:
        """Send a POST request with a JSON body.

        Args:
            path: The API path or absolute URL
            body: JSON-serializable request body
            parse: Optional callable turning the JSON response into a model

        Returns:
            The parsed response
        """
        url = self.build_url(path)
        logging.debug(f"POST {url}")
        response = self.session.post(url, json=body)
        self._check_response(response, url)
        data = response.json()
        return parse(data) if parse else data

    def delete(self, path: str) -> None:
        """Send a DELETE request. Success is signaled by the status code alone."""
        url = self.build_url(path)
        logging.debug(f"DELETE {url}")
        response = self.session.delete(url)
        self._check_response(response, url)
