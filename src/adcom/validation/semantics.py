"""Validation semantics: rule identifiers carried by every issue.

Tests assert on these identifiers, so each one names exactly one check.

STRUCTURAL RULES (schema-driven, every message):
-----------------------------------------------

1. TYPE
   A populated field must hold its declared kind. bool never counts as an
   integer; int32 values must fit in 32 bits; float accepts int. A nested
   message must be an instance of its declared model. ERROR.

2. REQUIRED
   Fields declared required must be populated. ERROR.

3. ONEOF
   At most one member of a oneof group may be populated. A violation yields
   one ERROR for the group, however many members are set.

4. ENUM CODES
   Code 0 is unknown/unset and always accepted. A non-zero code missing from
   the registry is a WARNING (forward-compatible), severity configurable.

5. VALUE SETS
   Plain int32 fields with a documented value set (0/1 flags, ssai, ampren,
   vcm, fixed) outside that set: WARNING.

6. EXTENSIONS
   ``ext`` keys must be field numbers inside the message's extension range;
   values are opaque. A message with no range accepts no extensions. ERROR.

7. UNKNOWN FIELDS
   Named fields the schema does not declare are preserved and reported as a
   WARNING, severity configurable.

8. DEPTH
   Nesting beyond the configured maximum stops the walk with an ERROR.

CROSS-FIELD RULES (named, per message type; see rules.py):
----------------------------------------------------------
Placement subtype required, asset subtype required (ERROR); all others WARNING.
"""

RULE_TYPE_MISMATCH = "type_mismatch"
RULE_REQUIRED_FIELD = "required_field"
RULE_ONEOF_EXCLUSIVE = "oneof_exclusive"
RULE_ENUM_UNKNOWN_CODE = "enum_unknown_code"
RULE_VALUE_OUT_OF_SET = "value_out_of_set"
RULE_EXTENSION_RANGE = "extension_range"
RULE_UNKNOWN_FIELD = "unknown_field"
RULE_MAX_DEPTH = "max_depth"

RULE_PLACEMENT_SUBTYPE_REQUIRED = "placement_subtype_required"
RULE_ASSET_SUBTYPE_REQUIRED = "asset_subtype_required"
RULE_DISPLAY_FORMAT_MIXED = "display_format_mixed"
RULE_SIZE_MIXED = "size_mixed"
RULE_DURATION_RANGE = "duration_range"
RULE_BITRATE_RANGE = "bitrate_range"
RULE_SKIP_SETTINGS = "skip_settings"
RULE_SINGLE_END_CARD = "single_end_card"
RULE_GEO_COORDINATES = "geo_coordinates"
RULE_GENDER_CODE = "gender_code"
RULE_YEAR_OF_BIRTH = "year_of_birth"
RULE_MCCMNC_FORMAT = "mccmnc_format"
