"""SAST result models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Vulnerability:
    """A single finding reported by the analysis."""

    cvss: str
    rank: str
    class_name: str
    method: str
    vul_id: str
    long_message: str
    class_message: str
    short_message: str

    def to_dict(self):
        """Convert to the service's wire shape."""
        return {
            'cvss': self.cvss,
            'rank': self.rank,
            'class': self.class_name,
            'method': self.method,
            'vul_id': self.vul_id,
            'longMessage': self.long_message,
            'classMessage': self.class_message,
            'shortMessage': self.short_message
        }


@dataclass(frozen=True)
class Library:
    """Third-party library found in the codebase."""

    name: str
    version: str

    def to_dict(self):
        return {'name': self.name, 'version': self.version}


@dataclass(frozen=True)
class Dra:
    """Data Risk Analytics finding."""

    file: str
    dra: str
    type: str

    def to_dict(self):
        return {'file': self.file, 'dra': self.dra, 'type': self.type}


@dataclass(frozen=True)
class Sast:
    """Completed scan result. Built whole by the result mapper or not at all."""

    score: float
    score_text: str
    vulnerabilities: tuple = ()
    libraries: tuple = ()
    dras: tuple = ()

    def to_dict(self):
        """Convert to the document written as result-<component>.json."""
        return {
            'sastResult': {'securityScore': self.score_text},
            'sastVulnerabilities': [v.to_dict() for v in self.vulnerabilities],
            'sastLibraries': [lib.to_dict() for lib in self.libraries],
            'sastDras': [d.to_dict() for d in self.dras]
        }

    def __repr__(self):
        return (f"Sast(score={self.score}, vulnerabilities={len(self.vulnerabilities)}, "
                f"libraries={len(self.libraries)}, dras={len(self.dras)})")
