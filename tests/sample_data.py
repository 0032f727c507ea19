"""Sample modem data shared by the test modules."""

import json
from unittest.mock import Mock

PUBLIC_KEY = "jXesCa9ek/lI0/R4TNdr"
CHALLENGE = "q9l0h9ieIXKwJlEtTXps"
ADDRESS = "192.168.100.1"
USERNAME = "admin"
PASSWORD = "motorola"
TIMESTAMP = 1703361406202

# HMAC-MD5(key=PUBLIC_KEY + PASSWORD, data=CHALLENGE)
PRIVATE_KEY = "376888B58EBBAA4207D9D4E898C2E504"

DOWNSTREAM_RESPONSE = (
    "1^Locked^QAM256^20^531.0^ 2.8^45.1^0^0^|+|2^Locked^QAM256^13^489.0^ 3.1^45.4^0^0^|+|"
    "3^Locked^QAM256^14^495.0^ 3.0^45.5^0^0^|+|4^Locked^QAM256^15^501.0^ 3.0^41.6^0^0^|+|"
    "5^Locked^QAM256^16^507.0^ 3.0^40.7^0^0^|+|6^Locked^QAM256^17^513.0^ 3.1^43.3^0^0^|+|"
    "7^Locked^QAM256^18^519.0^ 3.0^45.4^0^0^|+|8^Locked^QAM256^19^525.0^ 3.0^45.4^0^0^|+|"
    "9^Locked^QAM256^21^537.0^ 2.6^45.3^10^0^|+|10^Locked^QAM256^22^543.0^ 2.3^44.9^14^0^|+|"
    "11^Locked^QAM256^23^549.0^ 2.3^45.0^11^0^|+|12^Locked^QAM256^24^555.0^ 1.9^44.7^0^0^|+|"
    "13^Locked^QAM256^25^561.0^ 2.1^44.8^0^0^|+|14^Locked^QAM256^26^567.0^ 2.3^44.5^0^0^|+|"
    "15^Locked^QAM256^27^573.0^ 2.4^44.8^0^0^|+|16^Locked^QAM256^28^579.0^ 2.6^44.8^0^0^|+|"
    "17^Locked^QAM256^29^585.0^ 2.6^44.9^0^0^|+|18^Locked^QAM256^30^591.0^ 2.8^45.0^0^0^|+|"
    "19^Locked^QAM256^31^597.0^ 2.8^45.0^0^0^|+|20^Locked^QAM256^32^603.0^ 2.8^39.5^0^0^|+|"
    "21^Locked^QAM256^33^609.0^ 2.9^44.3^0^0^|+|22^Locked^QAM256^34^615.0^ 3.1^45.2^0^0^|+|"
    "23^Locked^QAM256^35^621.0^ 3.2^44.9^28138575^44205737^|+|"
    "24^Locked^QAM256^36^627.0^ 3.4^30.9^261314250^787815699^|+|"
    "25^Locked^QAM256^37^633.0^ 3.3^37.4^103208291^126451293^|+|"
    "26^Locked^QAM256^38^639.0^ 3.8^45.3^4147493^506585^|+|27^Locked^QAM256^39^645.0^ 3.8^45.3^0^0^|+|"
    "28^Locked^QAM256^40^651.0^ 4.0^45.4^0^0^|+|29^Locked^QAM256^41^657.0^ 4.0^45.3^0^0^|+|"
    "30^Locked^QAM256^42^663.0^ 3.9^45.1^9^0^|+|31^Locked^QAM256^43^669.0^ 3.6^45.1^17^0^|+|"
    "32^Locked^QAM256^44^675.0^ 3.8^44.5^9^0^|+|33^Locked^OFDM PLC^193^957.0^-0.7^43.0^-1565968621^150^"
)

UPSTREAM_RESPONSE = "1^Locked^SC-QAM^4^5120^35.6^56.0^"


def ok_response(payload) -> Mock:
    """Build a mocked 200 response whose body is payload serialized as JSON."""
    return Mock(status_code=200, text=json.dumps(payload))
