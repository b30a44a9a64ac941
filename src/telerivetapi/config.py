import logging
import os
from dataclasses import dataclass, field
from typing import Union

import dotenv

from telerivetapi.consts import API_URL, ENV_FILE
from telerivetapi.telerivet_api import TelerivetAPI

logger = logging.getLogger(__name__)


@dataclass
class ApiConfig:
    api_key: str = field(repr=False)
    api_url: str = API_URL
    project_id: Union[None, str] = None
    timeout: Union[None, float] = None

    @staticmethod
    def from_env(env_file: str = ENV_FILE) -> 'ApiConfig':
        if dotenv.load_dotenv(env_file):
            logger.debug('Loaded environment from %s', env_file)
        api_key = os.environ.get('TELERIVET_API_KEY')
        if not api_key:
            raise ValueError('TELERIVET_API_KEY is not set')
        timeout = os.environ.get('TELERIVET_TIMEOUT')
        return ApiConfig(
            api_key=api_key,
            api_url=os.environ.get('TELERIVET_API_URL') or API_URL,
            project_id=os.environ.get('TELERIVET_PROJECT_ID') or None,
            timeout=float(timeout) if timeout else None,
        )

    def get_api(self) -> TelerivetAPI:
        return TelerivetAPI(self.api_key, self.api_url, self.timeout)
