# playlist_scraper/i18n.py
import locale

MESSAGES = {
    "en": {
        "fetching_playlist": "Fetching '{reference}'...",
        "parsing_file": "Reading '{file_path}'...",
        "playlist_summary": "{count} videos in '{title}' by {author}",
        "column_position": "#",
        "column_id": "ID",
        "column_title": "Title",
        "column_author": "Author",
        "column_duration": "Duration",
        "target_kind": "Kind: {kind}",
        "target_id": "ID: {identifier}",
        "target_url": "URL: {link}",
        "error": "Error:",
        "file_error": "Could not read '{file_path}': {error}",
        "help_reference": "Playlist id, playlist URL or channel/user videos URL.",
        "help_file": "Saved HTML of a playlist or channel videos page.",
        "help_yaml": "Print the playlist as YAML instead of a table.",
        "help_timeout": "HTTP timeout in seconds.",
        "help_lang": "Set the language for output messages (e.g., 'en' or 'fr').",
    },
    "fr": {
        "fetching_playlist": "Récupération de '{reference}'...",
        "parsing_file": "Lecture de '{file_path}'...",
        "playlist_summary": "{count} vidéos dans '{title}' par {author}",
        "column_position": "#",
        "column_id": "ID",
        "column_title": "Titre",
        "column_author": "Auteur",
        "column_duration": "Durée",
        "target_kind": "Type : {kind}",
        "target_id": "ID : {identifier}",
        "target_url": "URL : {link}",
        "error": "Erreur :",
        "file_error": "Impossible de lire '{file_path}' : {error}",
        "help_reference": "ID de playlist, URL de playlist ou URL des vidéos d'une chaîne.",
        "help_file": "HTML enregistré d'une page de playlist ou de vidéos de chaîne.",
        "help_yaml": "Afficher la playlist en YAML plutôt qu'en tableau.",
        "help_timeout": "Délai d'attente HTTP en secondes.",
        "help_lang": "Définit la langue des messages de sortie (ex: 'en' ou 'fr').",
    },
}

_current_lang = "en"

def get_default_lang():
    try:
        lang_code, _ = locale.getlocale()
        return "fr" if lang_code and lang_code.startswith("fr") else "en"
    except (ValueError, TypeError):
        return "en"

def set_lang(lang: str):
    global _current_lang
    _current_lang = lang if lang in MESSAGES else "en"

def get_message(key, **kwargs):
    lang = _current_lang
    if lang not in MESSAGES or key not in MESSAGES[lang]:
        # Fallback to English if key not found in current language
        lang = "en"

    message_template = MESSAGES[lang].get(key, f"Translation missing for key: {key}")

    try:
        return message_template.format(**kwargs)
    except KeyError as e:
        return f"Formatting error for key '{key}': missing placeholder {e}"

# Initialize with default system language
set_lang(get_default_lang())
