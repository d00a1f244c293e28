"""
Terms and conditions shown by the terms dialog.

The form never inspects the clauses; it only records whether the acceptance
token was given.
"""

from __future__ import annotations

from typing import Optional

ACCEPTANCE_TOKEN = "accepted"

TERMS_TITLE = "Conditions Générales"

TERMS_CLAUSES: tuple[str, ...] = (
    "1. Réservation et paiement : La réservation est confirmée après le paiement d'un acompte "
    "de 30% du montant total. Le solde doit être réglé au plus tard 30 jours avant la date d'arrivée.",
    "2. Annulation : En cas d'annulation plus de 30 jours avant la date d'arrivée, l'acompte est "
    "remboursé à 50%. Pour une annulation entre 15 et 30 jours avant l'arrivée, l'acompte est "
    "conservé. Pour une annulation moins de 15 jours avant l'arrivée, le montant total de la "
    "réservation est dû.",
    "3. Arrivée et départ : L'arrivée se fait à partir de 15h et le départ avant 11h, sauf accord préalable.",
    "4. Utilisation des lieux : Le locataire s'engage à utiliser les lieux paisiblement et à les "
    "maintenir en bon état.",
    "5. Capacité : Le nombre de personnes utilisant le logement ne doit pas excéder la capacité "
    "indiquée lors de la réservation.",
    "6. Animaux : Les animaux ne sont pas acceptés, sauf accord préalable du propriétaire.",
    "7. Responsabilité : Le propriétaire décline toute responsabilité en cas de vol ou de dommage "
    "personnel pendant le séjour.",
    "8. Litiges : En cas de litige, seul le tribunal de la juridiction de la location sera compétent.",
)


def is_acceptance(token: Optional[str]) -> bool:
    return token == ACCEPTANCE_TOKEN
