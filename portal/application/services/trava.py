# portal/application/services/trava.py
#
# Trava unica de escrita do registro em memoria. Toda sequencia
# carregar -> transicao pura -> gravar roda dentro dela, entao duas
# requisicoes concorrentes nunca partem do mesmo estado lido.
from __future__ import annotations

import threading

TRAVA_REGISTRO = threading.RLock()
