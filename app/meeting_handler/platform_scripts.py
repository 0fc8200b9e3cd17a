"""
Platform-specific DOM selectors and JavaScript for meeting automation.

Meeting UIs change often, so every selector the join flows rely on lives
here rather than inline in the handlers.
"""

from app.domain.models import MeetingPlatform

# =============================================================================
# DOM SELECTORS
# =============================================================================

PLATFORM_SELECTORS = {
    MeetingPlatform.GOOGLE_MEET: {
        # Google sign-in
        "email_input": ['input[type="email"]'],
        "email_next": ["#identifierNext"],
        "password_input": ['input[type="password"]'],
        "password_next": ["#passwordNext"],

        # Pre-join screen; the join control has no stable attribute
        "button": ['div[role="button"]', 'button'],

        # In-call confirmation
        "leave_call": [
            'button[aria-label*="Leave call"]',
            'div[role="button"][aria-label*="Leave call"]',
        ],
    },
    MeetingPlatform.ZOOM: {
        # "Join from your browser" link on the launch page
        "join_from_browser": ['a[href*="/wc/join/"]'],
        "name_input": ["input#inputname"],
        "submit": ['button[type="submit"]'],
        "leave_call": [
            'button[aria-label*="Leave"]',
            'button.footer__leave-btn',
        ],
    },
    MeetingPlatform.TEAMS: {
        "cookie_accept": ["button#acceptButton"],
        "use_web_app": ["a.use-app-lnk"],
        "name_input": ["input#username"],
        "submit": ['button[type="submit"]'],
        "leave_call": [
            "button#hangup-button",
            'button[data-tid="hangup-main-btn"]',
        ],
    },
    MeetingPlatform.WEBEX: {
        "name_input": ['input[name="guestName"]'],
        "join_button": ["button.joinMeeting"],
        "leave_call": [
            'button[aria-label*="Leave"]',
            'button[data-test="end-call-button"]',
        ],
    },
}

# =============================================================================
# JAVASCRIPT
# =============================================================================

# Clicks the first button-role element whose text mentions "join".
# Resolves to true when something was clicked.
MEET_CLICK_JOIN_JS = """
() => {
    const buttons = [...document.querySelectorAll('div[role="button"], button')];
    const joinBtn = buttons.find(
        btn => btn.innerText && btn.innerText.toLowerCase().includes('join')
    );
    if (joinBtn) {
        joinBtn.click();
        return true;
    }
    return false;
}
"""


def get_selectors_for(platform: MeetingPlatform, element_type: str) -> list:
    """
    Get list of selectors for a specific element type.

    Args:
        platform: Meeting platform
        element_type: Key from the platform's selector dict

    Returns:
        List of CSS selectors to try
    """
    return PLATFORM_SELECTORS.get(platform, {}).get(element_type, [])


def get_selector(platform: MeetingPlatform, element_type: str) -> str:
    """
    Get a single selector matching any of the element's alternatives.

    Args:
        platform: Meeting platform
        element_type: Key from the platform's selector dict

    Returns:
        Comma-joined CSS selector list
    """
    return ", ".join(get_selectors_for(platform, element_type))
