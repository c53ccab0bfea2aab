"""DOI content-negotiation source: transport, status mapping and CSL-JSON parsing."""
