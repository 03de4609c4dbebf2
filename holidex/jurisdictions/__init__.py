"""Jurisdiction rule sets, registered with the JurisdictionRegistry on import."""
