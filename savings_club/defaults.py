"""
Default data values separated from operational configuration.

Questo modulo contiene i valori di 'contenuto' del dominio (limiti degli importi,
opzioni dei filtri, dimensione delle classifiche) che non vanno mescolati con
le impostazioni operative del runtime (DB, SECRET_KEY, upload, ecc.).
"""
from decimal import Decimal

# Importi: sempre positivi, due cifre decimali
AMOUNT_MIN = Decimal('0.01')
AMOUNT_MAX = Decimal('1000000.00')
CENT = Decimal('0.01')

# Lunghezze massime dei campi testuali
NAME_MAX_LENGTH = 50
DESCRIPTION_MAX_LENGTH = 50

# Opzioni del limite risultati nella lista pagamenti (0 = tutti)
LIMIT_OPTIONS = [
    (0, 'all'),
    (15, 'last 15'),
    (30, 'last 30'),
]

# Opzioni del filtro entrate/uscite (valore query string, etichetta)
INCOME_OPTIONS = [
    ('', '⟨ all ⟩'),
    ('true', 'incomes only'),
    ('false', 'expenses only'),
]

# Numero di voci per categoria nel grafico delle statistiche
TOP_N = 5

# Separatore tra nome membro e descrizione nelle etichette del grafico
CHART_LABEL_SEPARATOR = ' – '

# Chiavi primarie: intero con segno a 64 bit (limite di SQLite e dei DB comuni)
ID_MIN = -2 ** 63
ID_MAX = 2 ** 63 - 1
