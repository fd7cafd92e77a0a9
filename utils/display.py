from typing import Optional

from models.users import Role

ROLE_LABELS = {
    Role.ADMIN: "Administrador",
    Role.TEACHER: "Professor(a)",
    Role.PARENT: "Responsável",
}


def get_initials(name: Optional[str] = None, email: Optional[str] = None) -> str:
    """
    사용자 카드에 표시할 이니셜
    - 이름이 한 단어면 앞 두 글자, 여러 단어면 첫/마지막 단어의 첫 글자
    - 이름이 없으면 이메일로 대체, 둘 다 없으면 "?"
    """
    base = name if name and name.strip() else (email or "")
    parts = base.split()
    if not parts:
        return "?"
    if len(parts) == 1:
        return parts[0][:2].upper()
    return (parts[0][0] + parts[-1][0]).upper()


def role_label(role: Role) -> str:
    return ROLE_LABELS.get(role, role.value)
