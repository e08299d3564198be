"""
vSphere가 인식하는 게스트 OS 식별자(VirtualMachineGuestOsIdentifier) 목록입니다.

추론과 공개 이미지 카탈로그 생성에만 쓰이는 정적 데이터이며,
`InMemoryGuestOsRepository`나 `db_init`을 통해 주입합니다.
"""
from vsphere_images.models import Architecture, GuestOsEntry

I32 = Architecture.I32
I64 = Architecture.I64

# 'other'로 시작하는 식별자는 "지정되지 않음/기타" 변형입니다.
OTHER_PREFIX = "other"

DEFAULT_GUEST_OS_ENTRIES = tuple(GuestOsEntry(*row) for row in (
    ("dosGuest", "MS-DOS", I32),
    ("win31Guest", "Windows 3.1", I32),
    ("win95Guest", "Windows 95", I32),
    ("win98Guest", "Windows 98", I32),
    ("winMeGuest", "Windows Millennium Edition", I32),
    ("winNTGuest", "Windows NT 4", I32),
    ("win2000ProGuest", "Windows 2000 Professional", I32),
    ("win2000ServGuest", "Windows 2000 Server", I32),
    ("win2000AdvServGuest", "Windows 2000 Advanced Server", I32),
    ("winXPProGuest", "Windows XP Professional", I32),
    ("winXPPro64Guest", "Windows XP Professional Edition (x64)", I64),
    ("winNetStandardGuest", "Windows Server 2003, Standard Edition", I32),
    ("winNetStandard64Guest", "Windows Server 2003, Standard Edition (64 bit)", I64),
    ("winNetEnterpriseGuest", "Windows Server 2003, Enterprise Edition", I32),
    ("winNetEnterprise64Guest", "Windows Server 2003, Enterprise Edition (64 bit)", I64),
    ("winVistaGuest", "Windows Vista", I32),
    ("winVista64Guest", "Windows Vista (64 bit)", I64),
    ("windows7Guest", "Windows 7", I32),
    ("windows7_64Guest", "Windows 7 (64 bit)", I64),
    ("windows7Server64Guest", "Windows Server 2008 R2 (64 bit)", I64),
    ("windows8Guest", "Windows 8", I32),
    ("windows8_64Guest", "Windows 8 (64 bit)", I64),
    ("windows8Server64Guest", "Windows Server 2012 (64 bit)", I64),
    ("windows9Guest", "Windows 10", I32),
    ("windows9_64Guest", "Windows 10 (64 bit)", I64),
    ("windows9Server64Guest", "Windows Server 2016 (64 bit)", I64),
    ("windows2019srv_64Guest", "Windows Server 2019 (64 bit)", I64),
    ("windows2019srvNext_64Guest", "Windows Server 2022 (64 bit)", I64),
    ("windows11_64Guest", "Windows 11 (64 bit)", I64),
    ("freebsdGuest", "FreeBSD", I32),
    ("freebsd64Guest", "FreeBSD x64", I64),
    ("redhatGuest", "Red Hat Linux 2.1", I32),
    ("rhel5Guest", "Red Hat Enterprise Linux 5", I32),
    ("rhel5_64Guest", "Red Hat Enterprise Linux 5 (64 bit)", I64),
    ("rhel6Guest", "Red Hat Enterprise Linux 6", I32),
    ("rhel6_64Guest", "Red Hat Enterprise Linux 6 (64 bit)", I64),
    ("rhel7_64Guest", "Red Hat Enterprise Linux 7 (64 bit)", I64),
    ("rhel8_64Guest", "Red Hat Enterprise Linux 8 (64 bit)", I64),
    ("rhel9_64Guest", "Red Hat Enterprise Linux 9 (64 bit)", I64),
    ("centosGuest", "CentOS 4/5", I32),
    ("centos64Guest", "CentOS 4/5 (64 bit)", I64),
    ("centos7_64Guest", "CentOS 7 (64 bit)", I64),
    ("centos8_64Guest", "CentOS 8 (64 bit)", I64),
    ("oracleLinux64Guest", "Oracle Linux 4/5 (64 bit)", I64),
    ("slesGuest", "SUSE Linux Enterprise Server 9", I32),
    ("sles64Guest", "SUSE Linux Enterprise Server 9 (64 bit)", I64),
    ("sles12_64Guest", "SUSE Linux Enterprise Server 12 (64 bit)", I64),
    ("sles15_64Guest", "SUSE Linux Enterprise Server 15 (64 bit)", I64),
    ("opensuseGuest", "openSUSE", I32),
    ("opensuse64Guest", "openSUSE (64 bit)", I64),
    ("fedoraGuest", "Fedora", I32),
    ("fedora64Guest", "Fedora (64 bit)", I64),
    ("debian10Guest", "Debian GNU/Linux 10", I32),
    ("debian10_64Guest", "Debian GNU/Linux 10 (64 bit)", I64),
    ("debian11_64Guest", "Debian GNU/Linux 11 (64 bit)", I64),
    ("ubuntuGuest", "Ubuntu Linux", I32),
    ("ubuntu64Guest", "Ubuntu Linux (64 bit)", I64),
    ("solaris10Guest", "Solaris 10 (32 bit)", I32),
    ("solaris10_64Guest", "Solaris 10 (64 bit)", I64),
    ("solaris11_64Guest", "Solaris 11 (64 bit)", I64),
    ("darwin64Guest", "Mac OS 10.5 (64 bit)", I64),
    ("darwin19_64Guest", "Mac OS 10.15 (64 bit)", I64),
    ("otherLinuxGuest", "Other Linux", I32),
    ("otherLinux64Guest", "Other Linux (64 bit)", I64),
    ("other26xLinuxGuest", "Other 2.6.x Linux", I32),
    ("other26xLinux64Guest", "Other 2.6.x Linux (64 bit)", I64),
    ("other3xLinux64Guest", "Other 3.x Linux (64 bit)", I64),
    ("otherGuest", "Other", I32),
    ("otherGuest64", "Other (64 bit)", I64),
))
