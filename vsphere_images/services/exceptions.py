# vsphere_images/services/exceptions.py

# --- Session Exceptions ---
class AuthenticationError(Exception):
    """vCenter 세션(ServiceInstance)을 얻을 수 없을 때"""
    pass

# --- Remote Exceptions ---
class RemoteAccessError(Exception):
    """vCenter 호출(검색, 조회, 복제, 삭제)이 fault 또는 전송 오류로 실패했을 때"""
    pass

class TransientMappingError(Exception):
    """개별 엔티티의 설정을 읽거나 분류할 수 없을 때 (동시 삭제 등)"""
    pass

# --- Validation Exceptions ---
class ValidationError(Exception):
    """호출자가 넘긴 입력이 구조적으로 잘못되었을 때"""
    pass

# --- Not Found Exceptions ---
class NotFoundError(Exception):
    """참조한 엔티티를 찾을 수 없을 때"""
    pass

class ImageNotFoundError(NotFoundError):
    """이미지(템플릿)를 찾을 수 없을 때"""
    pass

class VirtualMachineNotFoundError(NotFoundError):
    """캡처 원본 VM을 찾을 수 없을 때"""
    pass

class DatacenterNotFoundError(NotFoundError):
    """설정된 데이터센터를 찾을 수 없을 때"""
    pass

# --- Capture Exceptions ---
class ImageCaptureError(Exception):
    """복제는 끝났지만 새 템플릿을 확인(재조회/분류)하지 못했을 때"""
    pass
