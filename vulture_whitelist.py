# Vulture whitelist file
# This file contains false positives that vulture incorrectly flags as dead code.
# These are typically settings fields, Pydantic fields, pytest fixtures, etc.
#
# Usage: python3 -m vulture provider vulture_whitelist.py

# =============================================================================
# Pydantic settings fields (populated from AAP_* environment variables)
# =============================================================================

aap_insecure_skip_verify  # config.py - AAP_INSECURE_SKIP_VERIFY
aap_timeout_seconds  # config.py - AAP_TIMEOUT_SECONDS
model_config  # config.py / models.py - pydantic configuration

# =============================================================================
# Wire payload fields (read by pydantic, mapped in reconciler.py)
# =============================================================================

job_type  # models.py - JobAPIResponse.job_type
ignored_fields  # models.py - JobAPIResponse.ignored_fields

# =============================================================================
# Public API used by the declarative driver
# =============================================================================

run_config_checks  # config_validation.py - also called by HttpxTransport.from_settings
has_warnings  # config_validation.py - ConfigValidationResult.has_warnings
close  # transport.py - HttpxTransport.close
is_unknown  # optional.py - Unknown/Null/Known predicates
is_null  # optional.py
is_known  # optional.py

# =============================================================================
# Pytest fixtures
# =============================================================================

fake_transport  # tests/conftest.py
restore_config_validation  # tests/test_config_validation.py
isolated_working_directory  # tests/conftest.py
