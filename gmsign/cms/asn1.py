"""ASN.1 structures of GB/T 35275 (SM2 cryptographic message syntax).

The layout mirrors PKCS#7 but uses the SM content-type and algorithm
identifiers. Only the structures needed for ``SignedData`` are defined.
"""

from __future__ import annotations

from asn1crypto import cms, core, crl, keys, x509

from gmsign.cms import oids

# Lets asn1crypto size SM2 private keys and name the curve in key structures
keys.NamedCurve.register("sm2p256v1", oids.SM2_CURVE, 32)


class GMObjectIdentifier(core.ObjectIdentifier):
    _map = {
        oids.SM3: "sm3",
        oids.SM2_SIGN: "sm2_sign",
        oids.SM2_SIGN_WITH_SM3: "sm2_sign_with_sm3",
        oids.DATA: "data",
        oids.SIGNED_DATA: "signed_data",
    }


class AlgorithmIdentifier(core.Sequence):
    _fields = [
        ("algorithm", GMObjectIdentifier),
        ("parameters", core.Any, {"optional": True}),
    ]


class SetOfAlgorithmIdentifier(core.SetOf):
    _child_spec = AlgorithmIdentifier


class ContentInfo(core.Sequence):
    _fields = [
        ("content_type", GMObjectIdentifier),
        ("content", core.Any, {"explicit": 0, "optional": True}),
    ]

    _oid_pair = ("content_type", "content")
    _oid_specs = {}


class SetOfCertificate(core.SetOf):
    _child_spec = x509.Certificate


class SetOfCertificateList(core.SetOf):
    _child_spec = crl.CertificateList


class SignerInfo(core.Sequence):
    _fields = [
        ("version", core.Integer),
        ("issuer_and_serial_number", cms.IssuerAndSerialNumber),
        ("digest_algorithm", AlgorithmIdentifier),
        ("authenticated_attributes", cms.CMSAttributes, {"implicit": 0, "optional": True}),
        ("digest_encryption_algorithm", AlgorithmIdentifier),
        ("encrypted_digest", core.OctetString),
        ("unauthenticated_attributes", cms.CMSAttributes, {"implicit": 1, "optional": True}),
    ]


class SetOfSignerInfo(core.SetOf):
    _child_spec = SignerInfo


class SignedData(core.Sequence):
    _fields = [
        ("version", core.Integer),
        ("digest_algorithms", SetOfAlgorithmIdentifier),
        ("content_info", ContentInfo),
        ("certificates", SetOfCertificate, {"implicit": 0, "optional": True}),
        ("crls", SetOfCertificateList, {"implicit": 1, "optional": True}),
        ("signer_infos", SetOfSignerInfo),
    ]


ContentInfo._oid_specs = {
    "data": core.OctetString,
    "signed_data": SignedData,
}
