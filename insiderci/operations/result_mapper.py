"""Terminal payload to Sast mapping."""

import math
from insiderci.operations.base import Operation
from insiderci.models.sast import Sast, Vulnerability, Library, Dra
from insiderci.utils.errors import ProtocolError

class ResultMapper(Operation):
    """Convert a completed job payload into a Sast result."""

    def execute(self, payload):
        """Build the full result or raise; never returns a partial Sast.

        Args:
            payload (dict): Terminal status payload

        Returns:
            Sast: Parsed result

        Raises:
            ProtocolError: If the score is missing or not a number in 0-100,
                or a result collection is absent
        """
        score_text, score = self._parse_score(payload)

        vulnerabilities = tuple(
            Vulnerability(
                cvss=self._text(item, 'cvss'),
                rank=self._text(item, 'rank'),
                class_name=self._text(item, 'class'),
                method=self._text(item, 'method'),
                vul_id=self._text(item, 'vul_id'),
                long_message=self._text(item, 'longMessage'),
                class_message=self._text(item, 'classMessage'),
                short_message=self._text(item, 'shortMessage')
            )
            for item in self._collection(payload, 'sastVulnerabilities')
        )
        libraries = tuple(
            Library(name=self._text(item, 'name'), version=self._text(item, 'version'))
            for item in self._collection(payload, 'sastLibraries')
        )
        dras = tuple(
            Dra(file=self._text(item, 'file'), dra=self._text(item, 'dra'), type=self._text(item, 'type'))
            for item in self._collection(payload, 'sastDras')
        )

        self.log(f"Result: score {score_text}, {len(vulnerabilities)} vulnerabilities, "
                 f"{len(libraries)} libraries, {len(dras)} DRA findings")

        return Sast(
            score=score,
            score_text=score_text,
            vulnerabilities=vulnerabilities,
            libraries=libraries,
            dras=dras
        )

    @staticmethod
    def _parse_score(payload):
        result = payload.get('sastResult')
        if not isinstance(result, dict) or 'securityScore' not in result:
            raise ProtocolError("Result payload has no sastResult.securityScore")

        raw = result['securityScore']
        if isinstance(raw, bool) or raw is None:
            raise ProtocolError(f"Unexpected score value {raw!r}")
        score_text = str(raw).strip()
        try:
            score = float(score_text)
        except ValueError:
            raise ProtocolError(f"Unexpected score value {score_text!r}")
        if not math.isfinite(score) or not 0 <= score <= 100:
            raise ProtocolError(f"Score {score_text} is outside 0-100")
        return score_text, score

    @staticmethod
    def _collection(payload, key):
        # [] is a valid empty result, a missing key or null is not
        items = payload.get(key)
        if not isinstance(items, list):
            raise ProtocolError(f"Result payload has no {key} list")
        for item in items:
            if not isinstance(item, dict):
                raise ProtocolError(f"Malformed entry in {key}: {item!r}")
        return items

    @staticmethod
    def _text(item, key):
        value = item.get(key)
        return '' if value is None else str(value)
