"""
Hiérarchie d'exceptions PropTrack.

Les messages exposés au client sont fixes : une propriété absente et une
propriété appartenant à un autre utilisateur produisent exactement la même
erreur.
"""

NOT_FOUND_MESSAGE = "Propriété introuvable"
OPERATION_FAILED_MESSAGE = "L'opération a échoué"
AUTHENTICATION_REQUIRED_MESSAGE = "Authentification requise"


class PropTrackError(Exception):
    """Exception de base PropTrack"""


class PropertyNotFoundError(PropTrackError):
    """Propriété inexistante ou appartenant à un autre utilisateur"""

    def __init__(self):
        super().__init__(NOT_FOUND_MESSAGE)


class AuthenticationRequiredError(PropTrackError):
    """Aucune session valide"""

    def __init__(self):
        super().__init__(AUTHENTICATION_REQUIRED_MESSAGE)


class PersistenceError(PropTrackError):
    """Échec de la base (contrainte, connexion...)"""

    def __init__(self, detail: str = OPERATION_FAILED_MESSAGE):
        # Le détail reste dans les logs, jamais dans la réponse
        super().__init__(detail)
        self.detail = detail
