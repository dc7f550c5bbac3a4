"""Address test vectors.

Checksum vectors are taken from EIP-55; ICAP vectors round-trip through
the direct ICAP notation.
"""

# EIP-55: all caps
EIP55_ALL_CAPS = [
    "0x52908400098527886E0F7030069857D2E4169EE7",
    "0x8617E340B3D01FA5F11F306F4090FD50E238070D",
]

# EIP-55: all lower
EIP55_ALL_LOWER = [
    "0xde709f2102306220921060314715629080e2fb77",
    "0x27b1fdb04752bbc536007a920d24acb045561c26",
]

# EIP-55: normal (mixed case)
EIP55_MIXED = [
    "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed",
    "0xfB6916095ca1df60bB79Ce92cE3Ea74c37c5d359",
    "0xdbF03B407c01E7cD3CBea99509d93f8DDDC8C6FB",
    "0xD1220A0cf47c7B9Be7A2E6BA89F429762e7b9aDb",
]

EIP55_VECTORS = EIP55_ALL_CAPS + EIP55_ALL_LOWER + EIP55_MIXED

# Hex address with its ICAP form
ICAP_ADDRESS = "0x8ba1f109551bD432803012645Ac136ddd64DBA72"
ICAP_FORM = "XE65GB6LDNXYOFTX0NSV3FUWKOWIXAMJK36"

ZERO_ADDRESS = "0x" + "00" * 20
MAX_ADDRESS = "0x" + "ff" * 20

# Sender used by the CREATE vectors
CREATE_SENDER = "0x6ac7ea33f8831ea9dcc53393aaa88b25a785dbf0"

# nonce -> contract address (lowercase)
CREATE_VECTORS = {
    0: "0xcd234a471b72ba2f1ccf0a70fcaba648a5eecd8d",
    1: "0x343c43a37d37dff08ae8c4a11544c718abb4fcf8",
    2: "0xf778b86fa74e846c4f0a1fbd1335fe81c00a0c91",
    3: "0xfffd933a0bc612844eaf0c6fe3e5b8e9b6c1d19c",
}
