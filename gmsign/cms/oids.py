"""Object identifiers assigned by GM/T 0006 for the SM algorithm family."""

SM3 = "1.2.156.10197.1.401"
SM2_CURVE = "1.2.156.10197.1.301"
SM2_SIGN = "1.2.156.10197.1.301.1"
SM2_SIGN_WITH_SM3 = "1.2.156.10197.1.501"

# GB/T 35275 content types
DATA = "1.2.156.10197.6.1.4.2.1"
SIGNED_DATA = "1.2.156.10197.6.1.4.2.2"
