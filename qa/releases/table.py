"""The QA release table.

What this table drives:
- download links on the QA status page
- which test results are accepted by the QA reports mailing list
- the QA API output

Each key is the *upcoming* PHP version: if 8.3.0 is not out yet, the key is
"8.3.0" and "8.3.0-dev" is the version reporting tests. Usually only this
table needs editing.

- active: the version is being tested; it may report to the mailing list and
  is linked from the status page
- release:
  - type: RC, alpha, beta... (case must match the tarball file name)
  - number: 0 if no such build exists yet, otherwise the RC/alpha/beta number
  - sha256_bz2 / sha256_gz / sha256_xz: checksums of the published tarballs
  - date: release date for display, e.g. "26 Oct 2023"
  - baseurl: where the tarballs are downloaded from

More checksum algorithms are published by adding ChecksumAlgorithm members and
the matching "<algorithm>_<archive>" fields, e.g. "sha512_gz".
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from qa.releases.model import ChecksumAlgorithm

QA_RELEASES: Mapping[str, Mapping[str, object]] = MappingProxyType(
    {
        "8.0.29": {
            "active": True,
            "release": {
                "type": "RC",
                "number": 0,
                "sha256_gz": "",
                "sha256_bz2": "",
                "sha256_xz": "",
                "date": "08 Jun 2023",
                "baseurl": "https://downloads.php.net/",
            },
        },
        "8.1.25": {
            "active": True,
            "release": {
                "type": "RC",
                "number": 1,
                "sha256_gz": "4fc3569f640169d7cfd103a6273f93fa535c5e350b49f754013165fc33b9375e",
                "sha256_bz2": "ab652faf7e9a997263ca11e972b3f45d29b2707ee6bff95b9abf9c24732d4be0",
                "sha256_xz": "46e85eed493cfdfffd5ce2e50ef726ab4c09e0e3713a1c4c25c2f79192c8337b",
                "date": "12 Oct 2023",
                "baseurl": "https://downloads.php.net/~patrickallaert/",
            },
        },
        "8.2.12": {
            "active": True,
            "release": {
                "type": "RC",
                "number": 1,
                "sha256_bz2": "29f6e09e47e566da02e198cdbd486a4a1b658bd9af7df6db1b294c9409ce0b78",
                "sha256_gz": "40ed39c34cb4c4440226ac6a4e2b4143d1ed4b1f7ae60c4cad47b6a0cc60f1fd",
                "sha256_xz": "413b91f79227950c109c544465c3062766a3940d2f0241fef8e9a367c1be65fa",
                "date": "12 Oct 2023",
                "baseurl": "https://downloads.php.net/~pierrick/",
            },
        },
        "8.3.0": {
            "active": True,
            "release": {
                "type": "RC",
                "number": 5,
                "sha256_bz2": "44f883a68f7ebff3dca4cd5903bc7707a587f18307f2384eea832d70ddcfa3de",
                "sha256_gz": "9c7f8755bfd7b915e48874ab4aee25bbe4c40db9a5bf1aff150a6ca076fd33c0",
                "sha256_xz": "238d9d79ddad64ee5943e894e4378d2a34fe98d368a307b0f2034e603781e5a6",
                "date": "26 Oct 2023",
                "baseurl": "https://downloads.php.net/~jakub/",
            },
        },
    }
)

QA_CHECKSUM_TYPES: tuple[str, ...] = tuple(algo.value for algo in ChecksumAlgorithm)
