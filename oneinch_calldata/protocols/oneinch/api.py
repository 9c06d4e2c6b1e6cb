"""
1inch API Client

REST client for the 1inch swap aggregator (v6.0) /swap endpoint.
Only fetches the router calldata; nothing is signed or sent on chain.
"""

import logging
from typing import Optional, Dict, Any

import httpx
from web3 import Web3

from ...types import QuoteRequest
from ...errors import ConfigurationError, UpstreamError, MalformedResponse
from ...infra.retry import execute_with_rate_limit_retry
from ...config import config as global_config

logger = logging.getLogger(__name__)


class OneInchAPI:
    """
    1inch REST API client (v6.0)

    Usage:
        with OneInchAPI(chain_id="1") as api:
            raw = api.fetch_raw_instruction(request)

    Note:
        Requires a 1inch API key. Set ONEINCH_API_KEY environment variable.
    """

    def __init__(
        self,
        chain_id: Optional[str] = None,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        slippage: Optional[float] = None,
        max_attempts: Optional[int] = None,
        retry_delay: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize 1inch API client

        Args:
            chain_id: Default chain ID, used when a request is not given one
            api_key: 1inch API key (or set ONEINCH_API_KEY env var)
            base_url: API base URL
            timeout: Request timeout in seconds
            slippage: Slippage tolerance in percent
            max_attempts: Total attempts when throttled
            retry_delay: Seconds to wait after a 429
            transport: Custom httpx transport (e.g. httpx.MockTransport)
        """
        self._chain_id = chain_id
        self._api_key = api_key or global_config.oneinch.api_key
        self._base_url = (base_url or global_config.oneinch.base_url).rstrip("/")
        self._timeout = timeout or global_config.oneinch.timeout
        self._slippage = slippage if slippage is not None else global_config.oneinch.slippage
        self._max_attempts = max_attempts or global_config.oneinch.max_attempts
        self._retry_delay = retry_delay if retry_delay is not None else global_config.oneinch.retry_delay
        self._transport = transport
        self._client: Optional[httpx.Client] = None

        if not self._api_key:
            raise ConfigurationError.missing(
                "ONEINCH_API_KEY",
                "1inch API key is required. Set ONEINCH_API_KEY environment variable.",
            )
        if self._max_attempts < 1:
            raise ConfigurationError.invalid("max_attempts", "must be at least 1")

    @property
    def chain_id(self) -> Optional[str]:
        """Default chain ID this client is configured for"""
        return self._chain_id

    def _get_client(self) -> httpx.Client:
        """Get or create HTTP client with auth headers"""
        if self._client is None:
            self._client = httpx.Client(
                timeout=self._timeout,
                transport=self._transport,
                headers={
                    "Accept": "application/json",
                    "Authorization": f"Bearer {self._api_key}",
                },
            )
        return self._client

    def _build_url(self, chain_id: str, endpoint: str) -> str:
        """Build full API URL"""
        return f"{self._base_url}/{chain_id}/{endpoint}"

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Pick the most descriptive message out of an error body"""
        try:
            error_data = response.json()
        except ValueError:
            return response.text[:500] if response.text else f"HTTP {response.status_code}"

        if isinstance(error_data, dict):
            for key in ("description", "error", "message"):
                if error_data.get(key):
                    return str(error_data[key])
        return str(error_data)

    def _get_once(self, url: str, params: Dict[str, str]) -> Dict[str, Any]:
        """
        Single GET attempt

        Raises:
            UpstreamError: On any non-2xx status or transport failure
            MalformedResponse: If a 2xx body is not a JSON object
        """
        client = self._get_client()
        try:
            response = client.get(url, params=params)
        except httpx.RequestError as e:
            logger.warning(f"1inch API request error: {e}")
            raise UpstreamError.transport_failed(url, e) from e

        if response.is_error:
            logger.warning(f"1inch API response data  : {response.text[:500]}")
            logger.warning(f"1inch API response status: {response.status_code}")
            raise UpstreamError.http_error(
                response.status_code,
                self._error_message(response),
                body=response.text,
            )

        try:
            data = response.json()
        except ValueError:
            logger.error(f"1inch API returned non-JSON body: {response.text[:500]}")
            raise MalformedResponse.invalid_json(response.text)

        if not isinstance(data, dict):
            raise MalformedResponse.missing_tx_data(response.text)
        return data

    @staticmethod
    def _extract_tx_data(data: Dict[str, Any]) -> bytes:
        """Pull tx.data out of a swap response and convert it to bytes"""
        tx = data.get("tx")
        tx_data = tx.get("data") if isinstance(tx, dict) else None
        if not tx_data or not isinstance(tx_data, str):
            logger.error(f"1inch response is missing tx.data: {data}")
            raise MalformedResponse.missing_tx_data(str(data))

        try:
            return Web3.to_bytes(hexstr=tx_data)
        except ValueError:
            raise MalformedResponse.invalid_hex(tx_data)

    def get_swap(self, request: QuoteRequest) -> Dict[str, Any]:
        """
        Get the raw swap response from 1inch, retrying while throttled

        Args:
            request: Swap parameters

        Returns:
            Decoded JSON response

        Raises:
            RateLimitExceeded: If every attempt returned HTTP 429
            UpstreamError: On any other HTTP or transport failure
            MalformedResponse: If the body is not a JSON object
        """
        chain_id = request.chain_id or self._chain_id
        if not chain_id:
            raise ConfigurationError.missing("chain_id")

        url = self._build_url(chain_id, "swap")
        params = request.to_swap_params(self._slippage)

        return execute_with_rate_limit_retry(
            lambda: self._get_once(url, params),
            f"1inch_swap({chain_id})",
            max_attempts=self._max_attempts,
            retry_delay=self._retry_delay,
        )

    def fetch_raw_instruction(self, request: QuoteRequest) -> bytes:
        """
        Get the router calldata (tx.data) for a swap

        Args:
            request: Swap parameters

        Returns:
            Raw calldata bytes, starting with the router function selector
        """
        logger.info(f"Requesting 1inch swap calldata: {request}")
        data = self.get_swap(request)
        raw = self._extract_tx_data(data)
        logger.debug(f"Received {len(raw)} bytes of calldata, selector=0x{raw[:4].hex()}")
        return raw

    def close(self):
        """Close HTTP client"""
        if self._client:
            self._client.close()
            self._client = None

    def __enter__(self) -> "OneInchAPI":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __repr__(self) -> str:
        return f"OneInchAPI(chain_id={self._chain_id})"
