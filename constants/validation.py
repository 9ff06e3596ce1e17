"""
Validation Constants

Column limits for the settings table and the accepted fail modes.
"""

# Maximum field lengths (enforced by the column definitions)
MAX_LENGTHS = {
    'key': 100,
    'group': 100,
    'type': 20,
}

# Valid values for the SETTINGS_FAIL_MODE configuration key
VALID_FAIL_MODES = {'strict', 'lenient'}
