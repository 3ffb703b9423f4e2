"""HTTP adapters: the httpx-backed wire client."""
