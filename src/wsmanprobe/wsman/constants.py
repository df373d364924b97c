# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Namespaces and fixed payloads for WS-Management Identify."""

NAMESPACES = {
    "s": "http://www.w3.org/2003/05/soap-envelope",
    "wsmid": "http://schemas.dmtf.org/wbem/wsman/identity/1/wsmanidentity.xsd",
}

SOAP_CONTENT_TYPE = "application/soap+xml;charset=UTF-8"

IDENTIFY_REQUEST_BODY = (
    f'<s:Envelope xmlns:s="{NAMESPACES["s"]}" xmlns:wsmid="{NAMESPACES["wsmid"]}">'
    "<s:Header/>"
    "<s:Body><wsmid:Identify/></s:Body>"
    "</s:Envelope>"
)

# Element name -> IdentifyResult field.
IDENTIFY_FIELDS = {
    "ProtocolVersion": "protocol_version",
    "ProductVendor": "product_vendor",
    "ProductVersion": "product_version",
}
