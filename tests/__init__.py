# SPDX-License-Identifier: Apache-2.0
"""
vectordb_sdk tests

Wire-model decode/encode behaviour, resource clients against an in-memory
transport, the httpx transport against `httpx.MockTransport`, and request
bodies checked against JSON Schema.
"""
