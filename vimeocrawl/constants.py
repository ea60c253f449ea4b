"""Fixed values shared across the package: endpoints, codecs and file paths."""

PLAYER_VIMEO_URL = "https://player.vimeo.com/video/"

AUDIO_CODECS = {
    "aac_195k": "mp4a.40.2",
    "opus_102k": "opus",
    "opus_69k": "opus",
}
AUDIO_TYPE_1 = AUDIO_CODECS["aac_195k"]
AUDIO_TYPE_2 = AUDIO_CODECS["opus_102k"]
AUDIO_TYPE_3 = AUDIO_CODECS["opus_69k"]

VIDEO_CODECS = {
    "fhd": "avc1.64002A",
    "hd": "avc1.640020",
    "qhd": "avc1.64001F",
    "360p": "avc1.64001E",
    "240p": "avc1.640015F",
}
VIDEO_TYPE_FHD = VIDEO_CODECS["fhd"]
VIDEO_TYPE_HD = VIDEO_CODECS["hd"]
VIDEO_TYPE_QHD = VIDEO_CODECS["qhd"]
VIDEO_TYPE_360P = VIDEO_CODECS["360p"]
VIDEO_TYPE_240P = VIDEO_CODECS["240p"]

_DATA_DIR = "data"
_VIDEO_DIR = "videos"

BASE_PATH_SECTION_TOEIC = f"{_DATA_DIR}/toeic"
BASE_PATH_SECTION_IELTS = f"{_DATA_DIR}/ielts"

PATH_VIDEO_OUTPUT = f"{_VIDEO_DIR}/output.mp4"

PATH_FILE_SUCCESS = f"{_DATA_DIR}/success.json"
PATH_FILE_ERROR = f"{_DATA_DIR}/error.json"