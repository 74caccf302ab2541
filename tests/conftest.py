"""Shared sample messages."""
import pytest


OMA123_FPL = (
    "(FPL-OMA123-IS\n"
    "-B738/M-SDE2E3FGHIJ1J3J5M1RWY/LB1D1\n"
    "-OMDB1200\n"
    "-N0450F360 DCT RASKI UT169 GABKO DCT\n"
    "-OOSA0145 OOMS\n"
    "-PBN/A1B1C1D1L1 NAV/GBAS COM/TCAS DAT/SV SUR/260B DOF/260215 REG/A4OEE "
    "EET/OOMM0045 SEL/ABCD OPR/OMA PER/C ALTN/OOMS RMK/TCAS EQUIPPED)"
)

OMS456_FPL = (
    "(FPL-OMS456-IS\n"
    "-A20N/M-SDE2E3FGHIJ1J3J5M1RWXY/LB1B2D1\n"
    "-OOSA0800\n"
    "-N0440F380 DCT RASKI UT169 GABKO DCT\n"
    "-OOMS0130\n"
    "-PBN/A1B2C2D2S1S2 NAV/SBAS COM/TCAS DAT/SV SUR/260B DOF/260215 REG/A4OSA "
    "EET/OOMM0030 OPR/OMS PER/C)"
)

ABY789_FPL = (
    "(FPL-ABY789-IS\n"
    "-A320/M-SDE2E3FGHIJ1J3J5M1RWY/LB1D1\n"
    "-OMSJ1400\n"
    "-N0420F340 DCT\n"
    "-OOSA0200 OOMS\n"
    "-PBN/A1B2 NAV/SBAS COM/TCAS DOF/260215 REG/A6AEE EET/OOMM0100 OPR/ABY PER/C ALTN/OOMS)"
)

RUNWAY_CLOSURE_NOTAM = (
    "(A1234/26 NOTAMN\n"
    "Q) OOMM/QMRLC/IV/NBO/A/000/999/1703N05405E005\n"
    "A) OOSA\n"
    "B) 2602151200\n"
    "C) 2603151600\n"
    "E) RWY 07/25 CLSD DUE WIP)"
)

AIRSPACE_NOTAM = (
    "(D0321/26 NOTAMN\n"
    "Q) OOMM/QRRCA/IV/BO/W/000/150/1703N05405E020\n"
    "A) OOMM\n"
    "B) 2602200600\n"
    "C) 2602201800\n"
    "E) TEMPO RESTRICTED AREA ESTABLISHED WI 20NM RADIUS OF OOSA AD SFC TO FL150 DUE MIL EXERCISE\n"
    "F) SFC\n"
    "G) FL150)"
)


@pytest.fixture
def oma123_fpl():
    return OMA123_FPL


@pytest.fixture
def oms456_fpl():
    return OMS456_FPL


@pytest.fixture
def aby789_fpl():
    return ABY789_FPL


@pytest.fixture
def runway_closure_notam():
    return RUNWAY_CLOSURE_NOTAM


@pytest.fixture
def airspace_notam():
    return AIRSPACE_NOTAM
