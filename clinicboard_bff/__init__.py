"""ClinicBoard BFF package."""
