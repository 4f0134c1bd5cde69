from rest_framework import status
from rest_framework.exceptions import APIException, PermissionDenied


class AlreadyRegistered(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "This user is already registered"
    default_code = "already_registered"


class NotRegistered(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Member profile not found, registration is required"
    default_code = "not_registered"


class SelfActionForbidden(PermissionDenied):
    default_detail = "You cannot perform this action on yourself"
    default_code = "self_action_forbidden"


class GenerationRoleExists(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "A role already exists for this generation"
    default_code = "generation_role_exists"


class DiscordBotError(APIException):
    status_code = status.HTTP_502_BAD_GATEWAY
    default_detail = "There was an error with the Discord bot"
    default_code = "discord_bot_error"


class StoreError(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Failed to save the changes"
    default_code = "store_error"
